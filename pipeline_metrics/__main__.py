import sys

from pipeline_metrics.collect_delivery_metrics import main

sys.exit(main())
