import sys

from payment_ledger.cli import main

sys.exit(main())
