import sys

from bulk_seeder.main import main

sys.exit(main())
