"""Run with: python -m letcalc"""

from letcalc.cli import main

if __name__ == "__main__":
    main()
