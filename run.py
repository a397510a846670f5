#!/usr/bin/env python3
"""
Script para iniciar o servidor web do interpretador BASIC
"""
import logging
import sys

import uvicorn

from config import Settings, configure_logging

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()
    configure_logging(settings)

    logger.info("Iniciando servidor em http://%s:%d", settings.host, settings.port)
    try:
        uvicorn.run("main:app", host=settings.host, port=settings.port,
                    log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Servidor interrompido")
    return 0


if __name__ == "__main__":
    sys.exit(main())
