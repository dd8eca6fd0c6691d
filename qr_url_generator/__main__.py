import sys

from qr_url_generator.cli import main

sys.exit(main())
