"""adifsub command line entry point"""

from adifsub.main import app

if __name__ == "__main__":
    app()
