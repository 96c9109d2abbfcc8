# notas/collector.py
"""Captura de notas: pide el numero de estudiantes y la nota de cada uno."""
import logging

from . import io_utils
from .config import DEFAULT_SCALE, GradeScale
from .errors import DataValidationError
from .models import Registry

logger = logging.getLogger(__name__)

COUNT_PROMPT = "Escriba el numero de estudiantes del curso:"
GRADE_PROMPT = "Escriba la nota del estudiante # {index} ,solo valores entre  ({min_grade} - {max_grade}) \n"
VALID_GRADE_MESSAGE = "la nota es valida: {grade} "
INVALID_GRADE_MESSAGE = "la nota no es valida, ingresala nuevamente "
NEGATIVE_COUNT_MESSAGE = "el numero de estudiantes no puede ser negativo "


def read_student_count() -> int:
    """Pide el numero de estudiantes hasta recibir un entero no negativo."""
    while True:
        count = io_utils.read_int(COUNT_PROMPT)
        if count >= 0:
            return count
        print(NEGATIVE_COUNT_MESSAGE)


def collect(count: int, scale: GradeScale = DEFAULT_SCALE) -> Registry:
    """Pide la nota de cada estudiante, repitiendo la pregunta hasta que este en rango."""
    registry = Registry(count, scale)

    for index in range(1, count + 1):
        while True:
            grade = io_utils.read_float(GRADE_PROMPT.format(index=index, min_grade=scale.min_grade, max_grade=scale.max_grade))
            try:
                registry.append(grade)
            except DataValidationError as e:
                logger.debug("Nota rechazada para el estudiante %d: %s", index, e)
                print(INVALID_GRADE_MESSAGE)
                continue

            logger.debug("Nota aceptada para el estudiante %d: %s", index, grade)
            print(VALID_GRADE_MESSAGE.format(grade=grade))
            break

    registry.freeze()
    return registry


def print_registry(registry: Registry) -> None:
    """Muestra el resumen del registro ya completo."""
    print(" \n registro completado: ")
    for record in registry:
        print(record)
