from cosmicnote.position import CursorPosition, Selection


def test_default_position_is_origin():
    pos = CursorPosition()
    assert (pos.line, pos.column) == (0, 0)


def test_positions_order_by_line_then_column():
    assert CursorPosition(1, 0) > CursorPosition(0, 50)
    assert CursorPosition(2, 3) < CursorPosition(2, 4)
    assert CursorPosition(2, 3) == CursorPosition(2, 3)


def test_collapsed_selection():
    pos = CursorPosition(3, 7)
    sel = Selection.collapsed(pos)
    assert sel.start == pos
    assert sel.end == pos
    assert sel.is_collapsed()


def test_non_collapsed_selection():
    sel = Selection(CursorPosition(0, 1), CursorPosition(0, 2))
    assert not sel.is_collapsed()


def test_normalized_keeps_forward_selection():
    a, b = CursorPosition(1, 2), CursorPosition(4, 0)
    assert Selection(a, b).normalized() == (a, b)


def test_normalized_swaps_backward_selection():
    a, b = CursorPosition(1, 2), CursorPosition(4, 0)
    assert Selection(b, a).normalized() == (a, b)


def test_normalized_same_line_backward():
    a, b = CursorPosition(2, 9), CursorPosition(2, 1)
    start, end = Selection(a, b).normalized()
    assert start == b
    assert end == a
    assert start <= end


def test_selection_end_can_be_updated():
    sel = Selection.collapsed(CursorPosition(0, 0))
    sel.end = CursorPosition(0, 5)
    assert not sel.is_collapsed()
    assert sel.normalized()[1] == CursorPosition(0, 5)