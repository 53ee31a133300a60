import json
import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from swisspairing.player import Player, Roster
from swisspairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    create_main_parser,
    main,
    run_interactive_mode,
    show_help,
)


def _write_roster(path):
    roster = Roster(
        players=(
            Player(name="Ann", rating=2000, id="a"),
            Player(name="Bob", rating=1800, id="b"),
            Player(name="Cid", rating=1600, id="c"),
        )
    )
    path.write_text(json.dumps(roster.to_dict()), encoding="utf-8")
    return path


def test_every_command_has_a_subparser():
    parser = create_main_parser()
    argv = {
        "generate": ["generate"],
        "pair": ["pair", "--roster", "x.json", "--round", "2"],
        "standings": ["standings", "--roster", "x.json"],
    }

    assert set(argv) == set(COMMANDS)
    for command, args in argv.items():
        assert parser.parse_args(args).command == command


def test_generate_writes_json(tmp_path):
    output = tmp_path / "tournament.json"

    code = main(["generate", "--players", "7", "--rounds", "3", "--seed", "4", "--output", str(output)])

    assert code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert len(payload["rounds"]) == 3


def test_generate_reads_options_file(tmp_path):
    options = tmp_path / "options.json"
    options.write_text(json.dumps({"byeValue": 0.5, "alternateColors": False}), encoding="utf-8")

    assert main(["generate", "--players", "5", "--rounds", "2", "--seed", "1", "--options", str(options)]) == 0


def test_pair_command(tmp_path, capsys):
    roster = _write_roster(tmp_path / "roster.json")

    code = main(["pair", "--roster", str(roster), "--round", "1", "--seed", "8"])

    assert code == 0
    out = capsys.readouterr().out
    assert "r1-bye: Cid (1600) - BYE" in out


def test_standings_command(tmp_path, capsys):
    roster = _write_roster(tmp_path / "roster.json")

    assert main(["standings", "--roster", str(roster)]) == 0
    assert "Ann" in capsys.readouterr().out


def test_bad_round_reports_error(tmp_path, capsys):
    roster = _write_roster(tmp_path / "roster.json")

    assert main(["pair", "--roster", str(roster), "--round", "0"]) == 2
    assert "Error" in capsys.readouterr().out


def _completions(completer, text):
    return {c.text for c in completer.get_completions(Document(text), CompleteEvent())}


def test_completer_offers_commands_and_options():
    completer = create_completer()

    top = _completions(completer, "")
    assert {"generate", "/generate", "pair", "/pair", "/help"} <= top
    assert {"--roster", "--round", "--seed"} <= _completions(completer, "pair ")


def test_show_help(capsys):
    show_help("pair")
    detail = capsys.readouterr().out
    assert "--round" in detail

    show_help("bogus")
    listing = capsys.readouterr().out
    assert "Unknown command: bogus" in listing
    assert "standings" in listing


def _run_session(text):
    with create_pipe_input() as pipe:
        pipe.send_text(text)
        session = PromptSession(input=pipe, output=DummyOutput())
        return run_interactive_mode(session)


def test_interactive_help_unknown_and_exit(capsys):
    code = _run_session("help pair\rbogus\rexit\r")

    out = capsys.readouterr().out
    assert code == 0
    assert "Round number to pair" in out
    assert "Unknown command: bogus" in out
    assert "Goodbye!" in out


def test_interactive_runs_a_command(tmp_path, capsys):
    roster = _write_roster(tmp_path / "roster.json")

    command = f"pair --roster {shlex.quote(str(roster))} --round 1 --seed 2"

    code = _run_session(f"{command}\r/pair --round\rquit\r")

    out = capsys.readouterr().out
    assert code == 0
    assert "r1-bye: Cid (1600) - BYE" in out
    assert "pairings valid" in out
