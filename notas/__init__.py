"""Registro de notas de un curso con menu de estadisticas por consola."""
