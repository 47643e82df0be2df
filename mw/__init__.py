__pkg_version__ = "0.1.0"

from .constants import PROJECT_URL as __project_url__  # noqa: E402
from .browser import open_project_page  # noqa: E402
from .config import is_launch_disabled, is_module_invocation  # noqa: E402

# Opening the project page is a side effect of importing the package.
# `python -m mw` and the `mw` console script run the CLI instead.
if not is_launch_disabled() and not is_module_invocation():
    open_project_page()
