# tests/test_collector.py
from notas.collector import (
    collect, read_student_count, print_registry,
    INVALID_GRADE_MESSAGE, NEGATIVE_COUNT_MESSAGE,
)
from notas.io_utils import FORMAT_ERROR_MESSAGE
from notas.models import Registry
from notas.config import GradeScale

def test_collect_accepts_valid_grades_first_try(feed_input, capsys):
    prompts = feed_input(["0", "5", "2.5"])

    registry = collect(3)

    assert registry.grades == (0.0, 5.0, 2.5)
    assert registry.is_frozen
    assert len(prompts) == 3
    assert "Escriba la nota del estudiante # 1 ,solo valores entre  (0.0 - 5.0)" in prompts[0]
    assert "Escriba la nota del estudiante # 3 ,solo valores entre  (0.0 - 5.0)" in prompts[2]

    output = capsys.readouterr().out
    assert "la nota es valida: 0.0" in output
    assert "la nota es valida: 2.5" in output
    assert INVALID_GRADE_MESSAGE not in output

def test_collect_reprompts_same_student_until_valid(feed_input, capsys):
    # Estudiante 1: dos notas fuera de rango y un texto invalido antes de la buena.
    prompts = feed_input(["7", "-1", "abc", "4.0", "3.5"])

    registry = collect(2)

    assert [(r.student_index, r.grade) for r in registry] == [(1, 4.0), (2, 3.5)]
    assert sum("# 1 " in p for p in prompts) == 4
    assert sum("# 2 " in p for p in prompts) == 1

    output = capsys.readouterr().out
    assert output.count(INVALID_GRADE_MESSAGE) == 2
    assert output.count(FORMAT_ERROR_MESSAGE) == 1

def test_collect_zero_students(feed_input):
    prompts = feed_input([])
    registry = collect(0)
    assert len(registry) == 0
    assert prompts == []

def test_read_student_count(feed_input, capsys):
    prompts = feed_input(["tres", "-2", "3"])

    assert read_student_count() == 3
    assert prompts[0] == "Escriba el numero de estudiantes del curso:"

    output = capsys.readouterr().out
    assert FORMAT_ERROR_MESSAGE in output
    assert NEGATIVE_COUNT_MESSAGE in output

def test_print_registry(capsys):
    print_registry(Registry.from_grades([3.0, 4.5]))
    output = capsys.readouterr().out
    assert "registro completado:" in output
    assert "estudiante:  1 -> nota : 3.0" in output
    assert "estudiante:  2 -> nota : 4.5" in output

def test_collect_rejects_underscore_grouping(feed_input, capsys):
    # "0_3" no es la nota 3.0: se vuelve a pedir.
    feed_input(["0_3", "0.3"])

    registry = collect(1)

    assert registry.grades == (0.3,)
    assert FORMAT_ERROR_MESSAGE in capsys.readouterr().out

def test_read_student_count_rejects_underscore_grouping(feed_input):
    feed_input(["1_0", "1"])
    assert read_student_count() == 1

def test_grade_prompt_follows_scale(feed_input):
    prompts = feed_input(["8.5"])

    registry = collect(1, GradeScale(max_grade=10.0))

    assert registry.grades == (8.5,)
    assert "solo valores entre  (0.0 - 10.0)" in prompts[0]
