import os

from nbtcodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['NBTCODEC_CONFIG_YAML'] = os.environ.get('NBTCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
