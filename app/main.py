from dotenv import load_dotenv

load_dotenv()

from server.server import create_app  # noqa: E402

# ASGI entry point
server_app = create_app()
