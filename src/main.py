from src.server.launcher import ServerLauncher
from src.server.application import ServerApplication


def create_app():
    """Factory function for creating the Flask app (for gunicorn)"""
    return ServerApplication().app


def main() -> None:
    """Main entry point"""
    ServerLauncher.run_from_env()


if __name__ == "__main__":
    main()
