import os
from pathlib import Path
from dataclasses import dataclass

# Lil helper to create a directory (and parents) if missing.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the per-user data folder. OKI_DATA_DIR wins, then APPDATA on Windows, then the XDG data home.
def resolve_data_dir() -> Path:
    override = os.getenv("OKI_DATA_DIR")
    if override:
        return Path(override)
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "Oki"
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "oki"
    return Path.home() / ".local" / "share" / "oki"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    assets: Path
    data: Path

    logs: Path
    current: Path

    @staticmethod
    def build(data_dir: Path | None = None):
        root = Path(__file__).resolve().parents[1]

        # Sound files and icons. May be empty, sound lookup just falls back to silence.
        assets = root / "assets"

        # Folder for all user-specific state and logs
        data = ensure_directory(data_dir or resolve_data_dir())
        logs = ensure_directory(data / "logs")
        current = ensure_directory(data / "current")

        return ProjectPaths(
            root = root,
            assets = assets,
            data = data,
            logs = logs,
            current = current,
        )
PATHS = ProjectPaths.build()
