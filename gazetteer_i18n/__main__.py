import sys

from gazetteer_i18n.cli import main

sys.exit(main())
