import os

# Keep the import-time launch from opening a browser during the test run
os.environ["MW_DISABLE_LAUNCH"] = "1"
