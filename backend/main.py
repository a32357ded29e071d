#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -e ".[test]"
#setup: python -m backend.main

from backend.app import create_app
from backend.config import AppConfig

config = AppConfig.load()
app = create_app(config)


if __name__ == "__main__":
    app.run(port=5000, debug=config.debug)
