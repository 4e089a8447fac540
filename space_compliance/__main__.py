"""Allow running as: python -m space_compliance"""

from space_compliance.main import run, serve
import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    elif len(sys.argv) > 1:
        run(sys.argv[1])
    else:
        print("usage: python -m space_compliance <profile.json> | --serve")
        sys.exit(2)
