

class ScoutBrowserError(Exception):
    """Base exception for all scout_browser errors"""
    pass

class ConfigError(ScoutBrowserError):
    """Invalid or inconsistent configuration file"""
    pass

class DataFileError(ScoutBrowserError):
    """
    Scouting data file could not be turned into a team pool
    missing file, empty CSV, missing key column, blank team numbers, etc
    """
    pass

class CommandError(ScoutBrowserError):
    """Bad arguments given to a command; the message is shown to the user"""
    pass
