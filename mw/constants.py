# mw/constants.py
"""
Constants for the mw package.
"""

# Page opened when the package is imported
PROJECT_URL = "https://github.com/orenngi/mw"

# Platform identifiers understood by the launch dispatch
PLATFORM_WINDOWS = "windows"
PLATFORM_DARWIN = "darwin"
PLATFORM_LINUX = "linux"
SUPPORTED_PLATFORMS = (PLATFORM_WINDOWS, PLATFORM_DARWIN, PLATFORM_LINUX)

# URL handler per platform: (program, leading args); the URL is appended last
URL_HANDLERS = {
    PLATFORM_WINDOWS: ("rundll32", ("url.dll,FileProtocolHandler",)),
    PLATFORM_DARWIN: ("open", ()),
    PLATFORM_LINUX: ("xdg-open", ()),
}

# Environment variable that turns off the import-time launch
DISABLE_LAUNCH_ENV = "MW_DISABLE_LAUNCH"
