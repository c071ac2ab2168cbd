import os


class Config:
    """Proxy configuration settings"""

    # Server settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Hiscore settings. The player name goes in a ?player=<player_name> param
    HISCORE_URL = os.getenv('HISCORE_URL', 'https://secure.runescape.com/m=hiscore_oldschool/index_lite.ws')
    HISCORE_TIMEOUT = float(os.getenv('HISCORE_TIMEOUT', 30))  # seconds
