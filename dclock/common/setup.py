from pathlib import Path
from dataclasses import dataclass
from platformdirs import user_data_dir, user_log_dir

APP_NAME = "DigitalClock"

# Lil helper function to create missing directories if missing.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path

    @staticmethod
    def build(app_name=APP_NAME):
        # Folder for user-specific settings. Nothing about the timer itself is ever written here.
        data = ensure_directory(Path(user_data_dir(app_name, appauthor=False)))

        # Logs go wherever the platform wants them, which isn't always under data.
        logs = ensure_directory(Path(user_log_dir(app_name, appauthor=False)))

        return ProjectPaths(
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
