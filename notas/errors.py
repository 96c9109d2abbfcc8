# notas/errors.py
"""Excepciones propias del registro de notas."""

class RegistroError(Exception):
    """Clase base para todas las excepciones de la aplicacion."""
    pass

class DataValidationError(RegistroError):
    """Dato fuera de dominio: nota fuera de rango o indice de estudiante invalido."""
    pass

class InputFormatError(RegistroError):
    """El texto ingresado no se puede convertir al numero esperado."""
    pass

class RegistryError(RegistroError):
    """Uso incorrecto del registro (por ejemplo, superar su capacidad)."""
    pass

class RegistryFrozenError(RegistryError):
    """Intento de agregar una nota a un registro ya cerrado."""
    pass

class EmptyRegistryError(RegistroError):
    """Se pidio una estadistica que no existe para un registro vacio."""
    pass
