import io

from hwlab.menu import INSTRUCTIONS, run_menu


def run(text):
    out = io.StringIO()
    stack, queue = run_menu(io.StringIO(text), out)
    return stack, queue, out.getvalue()


def test_add_then_remove():
    stack, queue, text = run("1\n10 20 30\n2\n3\n")
    assert list(stack) == ["20", "10"]
    assert list(queue) == ["20", "30"]
    assert "The popped value is 30 \n" in text
    assert "The dequeued value is 10 \n" in text
    assert text.endswith("Invalid choice.\n\n")


def test_add_lists_both_structures():
    stack, queue, text = run("1\na b\n3\n")
    assert stack.describe() in text
    assert queue.describe() in text
    assert text.count("pushing a data into stack... \n") == 2
    assert text.count("pushing a data into queue... \n") == 2


def test_remove_from_empty():
    stack, queue, text = run("2\n3\n")
    assert len(stack) == 0
    assert len(queue) == 0
    assert "there is no stack" in text
    assert "there is no queue" in text
    assert "The popped value is (null) \n" in text
    assert "The stack is empty. \n" in text
    assert "The queue is empty .\n" in text


def test_menu_prompt_shown_each_round():
    _, _, text = run("1\nx\n1\ny\n9\n")
    assert text.count(INSTRUCTIONS + "? ") == 3


def test_non_numeric_choice_is_invalid():
    stack, _, text = run("hello\n1\nx\n")
    assert len(stack) == 0
    assert "Invalid choice.\n\n" in text
    assert "Enter the numbers: " not in text


def test_end_of_input_stops():
    stack, queue, text = run("1\n5 6\n")
    assert list(queue) == ["5", "6"]
    assert list(stack) == ["6", "5"]
    assert "Invalid choice." not in text
    assert text.startswith("creating stack...\ncreating queue...\n")