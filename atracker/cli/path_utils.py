# cli/path_utils.py

import os

DATA_DIR_ENV_VAR = "ATRACKER_DATA_DIR"


def get_data_dir(user_input: str | None) -> str:
    """
    Resolves the directory holding the ATracker slot files.

    Args:
        user_input (str | None): An optional user-specified directory path (e.g. from `--data-dir`).

    Returns:
        A path string, chosen in this order:
            - `user_input`, if provided.
            - The `ATRACKER_DATA_DIR` environment variable, if set and not blank.
            - The default: `~/Documents/ATracker`.
    """
    if user_input is not None and user_input.strip():
        return os.path.abspath(os.path.expanduser(user_input.strip()))

    env_value = os.environ.get(DATA_DIR_ENV_VAR, "").strip()

    if env_value:
        return os.path.abspath(os.path.expanduser(env_value))

    documents = os.path.join(os.path.expanduser("~"), "Documents")
    return os.path.join(documents, "ATracker")


def resolve_data_dir(user_input: str | None) -> str:
    """
    Produces and ensures a valid data directory path.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    data_dir = get_data_dir(user_input)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir
