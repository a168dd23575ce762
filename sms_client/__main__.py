import sys

from sms_client.cli import main

sys.exit(main())
