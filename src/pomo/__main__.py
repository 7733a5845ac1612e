"""Allow running pomo as a module: python -m pomo."""

from pomo.main import main

if __name__ == "__main__":
    main()
