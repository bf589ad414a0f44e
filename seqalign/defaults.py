import logging
import os

SRC_PATH = os.path.dirname(__file__)

### operation weights
INSERT_COST = 1
DELETE_COST = 1
SUBSTITUTE_COST = 1
TRANSPOSE_COST = 1

### alignment CLI
MEASURE = "levenshtein"
PAIR_SEPARATOR = "\t"
SCRIPT_SEPARATOR = " "

### benchmark defaults
BENCH_ALPHABET = "abcde"
BENCH_PAIRS = 1000
BENCH_MAX_LENGTH = 20
BENCH_SEED = 1


LOCAL_CONFIG_FILE = SRC_PATH + '/defaults_config.py'
if os.path.isfile(LOCAL_CONFIG_FILE):
    try:
        with open(LOCAL_CONFIG_FILE, encoding="utf-8") as f:
            code = compile(f.read(), LOCAL_CONFIG_FILE, 'exec')
            exec(code)
        logging.info('defaults updated from file %s', LOCAL_CONFIG_FILE)
    except Exception:
        logging.warning('could not update defaults from file %s',
                        LOCAL_CONFIG_FILE)
        raise
