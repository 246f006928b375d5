import sys
from pathlib import Path

from streamlit.web import cli as streamlit_cli

APP_PATH = Path(__file__).resolve().parent / "ui" / "app.py"


def main() -> None:
    """Entry point: launch the Streamlit UI, forwarding extra CLI arguments."""
    sys.argv = ["streamlit", "run", str(APP_PATH), *sys.argv[1:]]
    sys.exit(streamlit_cli.main())


if __name__ == "__main__":
    main()
