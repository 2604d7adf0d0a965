"""
Executed when running: python -m snippetsls
"""
from snippetsls.main import main

if __name__ == "__main__":
    main()
