# jobboard/main.py

import os

from jobboard.factory import create_app

# Built from the environment / .env settings
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
