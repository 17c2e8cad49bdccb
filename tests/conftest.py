"""
Shared pytest fixtures for chatlog tests.
"""
import pytest
import pendulum

from chatlog.core import Config, Workspace


@pytest.fixture
def home(tmp_path, monkeypatch):
    """
    A throwaway $HOME with a ~/.cache directory, used as the base of the
    subject store. The working directory is moved next to it.
    """
    home = tmp_path / "home"
    (home / ".cache").mkdir(parents=True)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CHATLOG_HOME", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("EDITOR", "true")
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def fixed_today():
    """
    Return a fixed date for testing date-dependent functionality.
    """
    return pendulum.date(2025, 1, 15)


@pytest.fixture
def workspace(home, fixed_today):
    """
    A Workspace rooted at the temporary home, with "today" pinned.
    """
    return Workspace(config=Config(editor="true"),
                     base_dir=home,
                     home=str(home),
                     working_dir=home,
                     today=fixed_today)


@pytest.fixture
def subject_store(home):
    """
    Create the subjects alice, alicia and bob, with a few entries for alice.
    """
    store = home / "subjects"
    for name in ("alice", "alicia", "bob"):
        (store / name).mkdir(parents=True)

    alice = store / "alice"
    (alice / "20250110").write_text("tenth\n")
    (alice / "20241231").write_text("new year's eve\n")
    (alice / "notes.md").write_text("scratch\n")
    (alice / ".swp").write_text("")
    return store


@pytest.fixture
def launched(monkeypatch):
    """
    Stand in for the editor: records the command lines it would have run.
    """
    calls = []

    def fake_popen(args, *a, **kw):
        calls.append(args)
        return type('obj', (object,), {'pid': 0})

    monkeypatch.setattr("chatlog_cli.utils.subprocess.Popen", fake_popen)
    return calls
