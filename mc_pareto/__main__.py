import sys

from mc_pareto.main import main

sys.exit(main())
