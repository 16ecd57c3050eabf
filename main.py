import sys

from particle_sim.app import main

if __name__ == "__main__":
    sys.exit(main())
