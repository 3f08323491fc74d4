"""
Service context for log lines.

Identifies which process wrote a line when the stage server is restarted
between rehearsals and the live show.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'stage-broadcast')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a random hostname, bare-metal laptops get the PID
    if os.path.exists('/.dockerenv'):
        instance = socket.gethostname()[:12]
    else:
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
