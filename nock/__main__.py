import sys

from nock.interpreter import main

sys.exit(main())
