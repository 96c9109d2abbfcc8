# notas/config.py
"""Escala de notas y umbrales usados por todo el programa."""
from dataclasses import dataclass


@dataclass(frozen=True)
class GradeScale:
    """
    Limites de la escala de notas y umbrales de desempeño.

    Los umbrales son inclusivos en su limite inferior: una nota igual a
    ``excellent_threshold`` ya es "Excelente".
    """
    min_grade: float = 0.0
    max_grade: float = 5.0
    pass_threshold: float = 3.0
    excellent_threshold: float = 4.5
    very_good_threshold: float = 4.0

    def contains(self, grade: float) -> bool:
        """True si la nota esta dentro de [min_grade, max_grade]."""
        return self.min_grade <= grade <= self.max_grade


DEFAULT_SCALE = GradeScale()
