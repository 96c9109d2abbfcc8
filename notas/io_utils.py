# notas/io_utils.py
"""Lectura de numeros desde la consola: conversion del texto y reintento hasta que sea valido."""
import logging

from .errors import InputFormatError

logger = logging.getLogger(__name__)

FORMAT_ERROR_MESSAGE = "valor no valido, escriba un numero "


def parse_int(text: str) -> int:
    """Convierte el texto a entero o lanza InputFormatError."""
    # int() acepta "1_0" como 10; aqui no es un numero valido.
    if "_" in text:
        raise InputFormatError(f"'{text}' no es un numero entero.")
    try:
        return int(text.strip())
    except ValueError:
        raise InputFormatError(f"'{text}' no es un numero entero.")


def parse_float(text: str) -> float:
    """Convierte el texto a numero real o lanza InputFormatError."""
    if "_" in text:
        raise InputFormatError(f"'{text}' no es un numero.")
    try:
        return float(text.strip())
    except ValueError:
        raise InputFormatError(f"'{text}' no es un numero.")


def _read_number(prompt: str, parse):
    while True:
        try:
            return parse(input(prompt))
        except UnicodeDecodeError as e:
            logger.debug("Entrada con bytes invalidos: %s", e)
            print(FORMAT_ERROR_MESSAGE)
        except InputFormatError as e:
            logger.debug("Entrada rechazada: %s", e)
            print(FORMAT_ERROR_MESSAGE)


def read_int(prompt: str = "") -> int:
    """Pide un entero hasta que el usuario escriba uno bien formado."""
    return _read_number(prompt, parse_int)


def read_float(prompt: str = "") -> float:
    """Pide un numero real hasta que el usuario escriba uno bien formado."""
    return _read_number(prompt, parse_float)
