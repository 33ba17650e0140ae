import sys

from trianglepath.trianglepath import main

sys.exit(main())
