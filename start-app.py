import uvicorn

import argparse

from config import HOST, PORT

if __name__ == "__main__":

    parser = argparse.ArgumentParser(description="Start the Dealerships API with optional host and port.")

    parser.add_argument("--host", type=str, default=HOST, help="Host address to bind to")

    parser.add_argument("--port", type=int, default=PORT, help="Port number to bind to")

    parser.add_argument("--reload", action="store_true", help="Restart the server when code changes")

    args = parser.parse_args()

    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.reload)
