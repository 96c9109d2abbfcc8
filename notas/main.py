# notas/main.py
"""Punto de entrada: captura las notas del curso y luego abre el menu de reportes."""
import logging
import sys

from . import collector, reporter
from .config import DEFAULT_SCALE
from .models import Registry

logger = logging.getLogger(__name__)


def main_cli() -> Registry:
    """Ejecuta la sesion completa y devuelve el registro capturado."""
    count = collector.read_student_count()
    registry = collector.collect(count, DEFAULT_SCALE)
    logger.info("Registro completado con %d estudiantes", len(registry))

    collector.print_registry(registry)
    reporter.run(registry)
    return registry


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nPrograma detenido por el usuario.")
        return 1
    except EOFError:
        print("\nNo hay mas entrada, programa terminado.")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
