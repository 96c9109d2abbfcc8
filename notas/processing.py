# notas/processing.py
"""Estadisticas del registro: promedio, aprobados/reprobados, extremos y desempeño."""
from typing import List, Optional, Tuple

from .config import DEFAULT_SCALE, GradeScale
from .errors import EmptyRegistryError
from .models import GradeRecord, PerformanceBand, Registry


def group_average(registry: Registry) -> float:
    """Promedio aritmetico de todas las notas del registro."""
    grades = registry.grades
    if not grades:
        raise EmptyRegistryError("No hay estudiantes registrados para calcular el promedio.")
    return sum(grades) / len(grades)


def pass_fail_partition(registry: Registry, scale: Optional[GradeScale] = None) -> Tuple[List[int], List[int]]:
    """Devuelve (aprobados, reprobados) como listas de indices, en el orden del registro."""
    scale = scale or registry.scale
    passed = [r.student_index for r in registry if r.grade >= scale.pass_threshold]
    failed = [r.student_index for r in registry if r.grade < scale.pass_threshold]
    return passed, failed


def extremes(registry: Registry) -> Tuple[GradeRecord, GradeRecord]:
    """
    Devuelve (nota mas alta, nota mas baja).

    Con empates gana el primer estudiante en el orden del registro;
    max() y min() ya se quedan con la primera aparicion.
    """
    if not len(registry):
        raise EmptyRegistryError("No hay estudiantes registrados para buscar la nota mas alta y mas baja.")
    highest = max(registry, key=lambda r: r.grade)
    lowest = min(registry, key=lambda r: r.grade)
    return highest, lowest


def classify(grade: float, scale: GradeScale = DEFAULT_SCALE) -> PerformanceBand:
    """Nivel de desempeño de una nota; los umbrales se evaluan de mayor a menor."""
    if grade >= scale.excellent_threshold:
        return PerformanceBand.EXCELLENT
    elif grade >= scale.very_good_threshold:
        return PerformanceBand.VERY_GOOD
    elif grade >= scale.pass_threshold:
        return PerformanceBand.PASSED
    else:
        return PerformanceBand.FAILED


def classify_all(registry: Registry, scale: Optional[GradeScale] = None) -> List[Tuple[int, float, PerformanceBand]]:
    """(indice, nota, desempeño) para cada estudiante del registro."""
    scale = scale or registry.scale
    return [(r.student_index, r.grade, classify(r.grade, scale)) for r in registry]
