import logging

import uvicorn
from catering.api.api_run import app
from catering.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://127.0.0.1:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Listening on {local_url} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
