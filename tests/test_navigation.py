from dressings.navigation import NavigationState, Navigator


def test_initial_state_is_browsing() -> None:
    nav = Navigator()
    assert nav.state == NavigationState()
    assert nav.state.is_browsing
    assert not nav.state.can_go_back


def test_select_and_back_sequence() -> None:
    nav = Navigator()

    assert nav.select("Ranch")
    assert nav.state == NavigationState(current="Ranch", history=())
    assert nav.state.can_go_back

    nav.select("Caesar")
    assert nav.state == NavigationState(current="Caesar", history=("Ranch",))

    nav.back()
    assert nav.state == NavigationState(current="Ranch", history=())

    nav.back()
    assert nav.state.is_browsing
    assert nav.state.history == ()


def test_back_while_browsing_is_noop() -> None:
    nav = Navigator()
    nav.back()
    assert nav.state == NavigationState()


def test_history_is_most_recent_last() -> None:
    nav = Navigator()
    for name in ("A", "B", "C", "D"):
        nav.select(name)
    assert nav.state.history == ("A", "B", "C")
    nav.back()
    nav.back()
    assert nav.state == NavigationState(current="B", history=("A",))


def test_unknown_name_resets_to_browsing() -> None:
    nav = Navigator(known={"Ranch", "Caesar"})
    nav.select("Ranch")
    nav.select("Caesar")

    assert not nav.select("Thousand Island")
    assert nav.state == NavigationState()


def test_reset() -> None:
    nav = Navigator()
    nav.select("Ranch")
    nav.select("Caesar")
    nav.reset()
    assert nav.state.is_browsing
    assert nav.state.history == ()
