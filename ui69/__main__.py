# -*- coding: utf-8 -*-
from ui69.cli import main

if __name__ == "__main__":
    main()
