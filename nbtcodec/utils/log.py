# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import logging.config
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor


def setup_logging(
    *,
    json_logs: bool = False,
    debug: bool = False,
    capture_stdout: bool = False,
    extra_log_info: Optional[dict[str, str]] = None,
) -> None:
    """ Configure structlog on top of the standard logging module.

    This is a helper for applications (and tests) that use the codec, nothing in `nbtcodec` calls it: the library
    only emits debug events through `structlog.get_logger()` and never configures logging by itself. `json_logs`
    switches from the console renderer to one JSON object per line, `debug` lowers the level of the `nbtcodec`
    loggers.
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso', utc=False),
    ]

    if extra_log_info:
        def add_extra_log_info(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
            event_dict.update(extra_log_info)
            return event_dict
        shared_processors.append(add_extra_log_info)

    handlers = ['json' if json_logs else 'pretty']

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'plain': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processors': [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.dev.ConsoleRenderer(colors=False),
                ],
                'foreign_pre_chain': shared_processors,
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processors': [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
                'foreign_pre_chain': shared_processors,
            },
        },
        'handlers': {
            'pretty': {
                'class': 'logging.StreamHandler',
                'formatter': 'plain',
                'stream': sys.stdout if capture_stdout else sys.stderr,
            },
            'json': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': sys.stdout if capture_stdout else sys.stderr,
            },
            'null': {
                'class': 'logging.NullHandler',
            },
        },
        'loggers': {
            # set the level of the codec's loggers here
            'nbtcodec': {
                'handlers': handlers,
                'level': 'DEBUG' if debug else 'INFO',
                'propagate': False,
            },
            '': {
                'handlers': handlers,
                'level': 'INFO',
            },
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
