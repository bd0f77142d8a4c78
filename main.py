#!/usr/bin/env python3

from lookupbench.main import main

if __name__ == "__main__":
    main()
