#!/usr/bin/env python
"""Extract Pathfinder 2e creature stat blocks from saved pages.

Usage: pf2_creatures.py [options] page.html [page.html ...]
"""
from pf2statblock.creatures import main


if __name__ == "__main__":
    main()
