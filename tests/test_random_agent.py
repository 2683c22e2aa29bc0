from falling_blocks.rl.random_agent import run_random


def test_random_agent_runs_and_reports(capsys):
    total = run_random(steps=300, seed=2)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out


def test_random_agent_is_reproducible(capsys):
    assert run_random(steps=150, seed=9) == run_random(steps=150, seed=9)
