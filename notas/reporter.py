# notas/reporter.py
"""Menu de reportes sobre el registro ya capturado."""
import logging

from . import io_utils, processing
from .errors import EmptyRegistryError, RegistroError
from .models import MenuAction, Registry

logger = logging.getLogger(__name__)

MENU_PROMPT = "\nescriba la opcion a ejecutar:\n"
EMPTY_REGISTRY_MESSAGE = "no hay estudiantes registrados"


def print_menu():
    """Muestra las opciones del menu."""
    print("\nSeleccione una opcion:")
    print("1. Promedio general del grupo")
    print("2. Estudiantes aprobados y reprobados")
    print("3. Nota mas alta y más baja")
    print("4. Desempeño de cada estudiante")
    print("5. Salir")


def show_average(registry: Registry):
    average = processing.group_average(registry)
    band = processing.classify(average, registry.scale)
    print(f"el promedio del grupo es: {average}")
    print(f"clasificacion del promedio: {band.label}")


def show_pass_fail(registry: Registry):
    passed, failed = processing.pass_fail_partition(registry)
    print(f"los estudiantes aprobados son: estudiante #{passed}")
    print(f"los estudiantes reprobados son: estudiante #{failed}")
    print(f"total aprobados: {len(passed)} , total reprobados: {len(failed)}")


def show_extremes(registry: Registry):
    highest, lowest = processing.extremes(registry)
    print(f"La nota mas alta : estudiante {highest.student_index} con {highest.grade}")
    print(f"La nota mas baja : estudiante {lowest.student_index} con {lowest.grade}")


def show_classification(registry: Registry):
    for index, grade, band in processing.classify_all(registry):
        print(f"estudiante {index} -> Nota {grade} : {band.label}")


def run(registry: Registry):
    """Ciclo del menu; termina solo con la opcion de salir."""
    while True:
        print_menu()
        action = MenuAction.from_choice(io_utils.read_int(MENU_PROMPT))
        logger.debug("Opcion elegida: %s", action)

        try:
            if action is MenuAction.SHOW_AVERAGE:
                show_average(registry)

            elif action is MenuAction.SHOW_PASS_FAIL:
                show_pass_fail(registry)

            elif action is MenuAction.SHOW_EXTREMES:
                show_extremes(registry)

            elif action is MenuAction.SHOW_CLASSIFICATION:
                show_classification(registry)

            elif action is MenuAction.EXIT:
                print(" Gracias por usar nuestro sistema \n saliendo... ")
                break

            else:
                print("opcion no valida ")

        except EmptyRegistryError as e:
            logger.debug("%s", e)
            print(EMPTY_REGISTRY_MESSAGE)
        except RegistroError as e:
            logger.error("Error en la opcion %s: %s", action, e)
            print(f"error: {e}")
        except Exception as e:
            logger.exception("Error inesperado en la opcion %s", action)
            print(f"ocurrio un error inesperado: {e}")
