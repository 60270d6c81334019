from resultish import Both, Err, Ok, into_lenient, into_strict


def test_both_projections() -> None:
    r = Both(5, "bad")
    assert into_lenient(r) == Ok(5)
    assert into_strict(r) == Err("bad")


if __name__ == "__main__":
    test_both_projections()
    print("Basic test passed!")
