import logging
import sys

import uvicorn

from mobile_backend import config
from mobile_backend.main import app

logger = logging.getLogger("mobile-backend")

class Server(uvicorn.Server):
    async def startup(self, sockets=None):
        # uvicorn exits inside startup() when the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running at http://localhost:%d", self.config.port)

def build_server(host, port):
    return Server(uvicorn.Config(app, host=host, port=port, log_level=config.LOG_LEVEL))

def main():
    logging.basicConfig(
        stream=sys.stdout,
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    build_server(config.HOST, config.PORT).run()

if __name__ == "__main__":
    main()
