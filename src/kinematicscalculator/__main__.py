"""Run with: python -m kinematicscalculator"""
from kinematicscalculator.main import main

if __name__ == "__main__":
    main()
