import pytest

from minitools.rpn import RPNError, RPNStack, evaluate, main


def test_examples():
    assert evaluate("8 9 * 9 - 9 - 9 - 4 - 1 +") == 42
    assert evaluate("7 7 * 7 -") == 42
    assert evaluate("1 2 * 2 / 2 * 2 4 - +") == 0


def test_single_operand():
    assert evaluate("5") == 5.0


def test_operator_without_space():
    assert evaluate("1 2+") == evaluate("1 2 +")


def test_multiplication_chain_consistent():
    assert evaluate("9 9 * 9 *") == evaluate("9 9 9 * *")


@pytest.mark.parametrize(
    "expression",
    ["(1 + 1)", "1 20 -", "1 2.0 -", "1 2.0f -", "1 2 3 +", "", "+", "1 +", "1 2 %"],
)
def test_invalid_expressions(expression):
    with pytest.raises(RPNError):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["0 0 / +", "1 0 + 0 /"])
def test_division_by_zero(expression):
    with pytest.raises(ZeroDivisionError):
        evaluate(expression)


def test_stack_operations():
    stack = RPNStack()
    stack.push(6)
    stack.push(3)
    assert len(stack) == 2
    stack.apply("/")
    assert len(stack) == 1
    assert stack.value() == 2.0


def test_stack_subtraction_order():
    stack = RPNStack()
    stack.push(1)
    stack.push(4)
    stack.apply("-")
    assert stack.value() == -3.0


def test_stack_rejects_unknown_operator_without_popping():
    stack = RPNStack()
    stack.push(1)
    stack.push(2)
    with pytest.raises(RPNError):
        stack.apply("x")
    assert len(stack) == 2


def test_stack_needs_two_operands():
    stack = RPNStack()
    stack.push(1)
    with pytest.raises(RPNError):
        stack.apply("+")
    assert len(stack) == 1


def test_empty_stack_value():
    with pytest.raises(RPNError):
        RPNStack().value()


def test_main_prints_result(capsys):
    assert main(["7 7 * 7 -"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error: could not process expression\n"


def test_main_unprocessed(capsys):
    assert main(["(1 + 1)"]) == 1
    assert capsys.readouterr().err == "Error: expression wasn't processed.\n"


def test_main_division_by_zero(capsys):
    assert main(["1 0 /"]) == 1
    assert capsys.readouterr().err == (
        "Error: division by 0\nError: expression wasn't processed.\n"
    )


def test_main_leftover_operands(capsys):
    assert main(["1 2 3 +"]) == 1
    assert capsys.readouterr().err == "Error: invalid expression\n"