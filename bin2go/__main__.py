import sys

from bin2go.gen_go_file import main

sys.exit(main())
