from mllgeom.app import main


def test_main_prints_greeting(capsys):
    status = main([])
    assert status == 0
    assert capsys.readouterr().out == "Hello, world!\n"