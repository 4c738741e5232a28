"""Command-line interface."""
from ribbon.app import run

if __name__ == "__main__":
    run()
