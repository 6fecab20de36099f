import sys

from colorseq.cli import main

sys.exit(main())
