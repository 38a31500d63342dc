import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _flag(value: str) -> bool:
	return value.strip().lower() in ('1', 'true', 'yes', 'on')


HOST: str = os.getenv('COOKBOOK_HOST', '::')
PORT: int = int(os.getenv('COOKBOOK_PORT', '8080'))
DEBUG: bool = _flag(os.getenv('COOKBOOK_DEBUG', 'true'))

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
	level=LOG_LEVEL,
	format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
)
