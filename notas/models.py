# notas/models.py
"""Modelos de datos: registro de una nota, el registro del curso y los enums del menu."""
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .config import DEFAULT_SCALE, GradeScale
from .errors import DataValidationError, RegistryError, RegistryFrozenError


class GradeRecord:
    """Nota validada de un estudiante, identificado por su posicion (desde 1)."""
    __slots__ = ("_student_index", "_grade")

    def __init__(self, student_index: int, grade: float, scale: GradeScale = DEFAULT_SCALE):
        if isinstance(student_index, bool) or not isinstance(student_index, int) or student_index <= 0:
            raise DataValidationError("El indice del estudiante debe ser un entero positivo.")
        if isinstance(grade, bool) or not isinstance(grade, (int, float)):
            raise DataValidationError(f"La nota '{grade}' debe ser un numero.")
        if not scale.contains(grade):
            raise DataValidationError(
                f"La nota {grade} no es valida. Rango permitido {scale.min_grade} - {scale.max_grade}."
            )

        self._student_index = student_index
        self._grade = float(grade)

    @property
    def student_index(self) -> int:
        return self._student_index

    @property
    def grade(self) -> float:
        return self._grade

    def __repr__(self) -> str:
        return f"GradeRecord(student_index={self._student_index}, grade={self._grade})"

    def __str__(self) -> str:
        return f"estudiante:  {self._student_index} -> nota : {self._grade}"


class Registry:
    """
    Secuencia ordenada de notas del curso.

    Se crea vacia con una capacidad fija (el numero de estudiantes), se llena
    con ``append`` durante la captura y se cierra con ``freeze``. Los indices
    los asigna el propio registro: 1, 2, 3... en orden de llegada.
    """

    def __init__(self, capacity: int, scale: GradeScale = DEFAULT_SCALE):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise RegistryError("La capacidad del registro debe ser un entero no negativo.")
        self.capacity = capacity
        self.scale = scale
        self._records: List[GradeRecord] = []
        self._frozen = False

    @classmethod
    def from_grades(cls, grades, scale: GradeScale = DEFAULT_SCALE) -> "Registry":
        """Construye y cierra un registro a partir de una lista de notas ya conocidas."""
        grades = list(grades)
        registry = cls(len(grades), scale)
        for grade in grades:
            registry.append(grade)
        registry.freeze()
        return registry

    def append(self, grade: float) -> GradeRecord:
        """Agrega la nota del siguiente estudiante y devuelve el registro creado."""
        if self._frozen:
            raise RegistryFrozenError("El registro esta cerrado, no se pueden agregar notas.")
        if len(self._records) >= self.capacity:
            raise RegistryError(f"El registro ya tiene sus {self.capacity} estudiantes.")

        record = GradeRecord(len(self._records) + 1, grade, self.scale)
        self._records.append(record)
        return record

    def freeze(self) -> None:
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def grades(self) -> Tuple[float, ...]:
        return tuple(r.grade for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GradeRecord]:
        return iter(tuple(self._records))

    def __repr__(self) -> str:
        return f"Registry(capacity={self.capacity}, size={len(self._records)}, frozen={self._frozen})"


class MenuAction(Enum):
    """Opciones del menu de reportes, con el numero que escribe el usuario."""
    SHOW_AVERAGE = 1
    SHOW_PASS_FAIL = 2
    SHOW_EXTREMES = 3
    SHOW_CLASSIFICATION = 4
    EXIT = 5

    @classmethod
    def from_choice(cls, choice: int) -> Optional["MenuAction"]:
        """Devuelve la accion del numero elegido, o None si no existe."""
        try:
            return cls(choice)
        except ValueError:
            return None


class PerformanceBand(Enum):
    """Nivel de desempeño de una nota."""
    EXCELLENT = "Excellent"
    VERY_GOOD = "Very good"
    PASSED = "Passed"
    FAILED = "Failed"

    @property
    def label(self) -> str:
        """Etiqueta que se muestra en consola."""
        return _BAND_LABELS[self]


_BAND_LABELS = {
    PerformanceBand.EXCELLENT: "Excelente",
    PerformanceBand.VERY_GOOD: "Muy bien",
    PerformanceBand.PASSED: "Aprobado",
    PerformanceBand.FAILED: "Reprobado",
}
