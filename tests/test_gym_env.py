import numpy as np
import pytest
import gymnasium as gym

from antiword.gym_env import BACKSPACE_ACTION, SUBMIT_ACTION, GymAntiwordEnv
from antiword.session import SessionState, SubmitStatus
from antiword.vocab import WordVocab
from antiword.sampler import WordSampler

WORDS = ["CRANE", "REACT", "TRACE", "PLUMB", "BLUSH", "CRONE"]


@pytest.fixture
def env():
    vocab = WordVocab(list(WORDS))
    return GymAntiwordEnv(vocab, WordSampler(vocab, seed=0), render_mode="ansi")


def act_word(env, word):
    for ch in word:
        env.step(ord(ch) - 65)


def test_reset_observation_and_mask(env):
    obs, info = env.reset(options={"scripted_guesses": []})
    mask = info["action_mask"]

    assert obs.shape == (158,)
    assert env.observation_space.contains(obs)
    assert mask.shape == (28,)
    assert np.sum(mask[:26]) == 26
    assert mask[BACKSPACE_ACTION] == 0
    assert mask[SUBMIT_ACTION] == 0
    assert info["remaining"] == len(WORDS)


def test_partial_match_reward(env):
    env.reset(options={"scripted_guesses": []})
    act_word(env, "REACT")
    obs, reward, terminated, truncated, info = env.step(SUBMIT_ACTION)

    # REACT vs CRANE: one right place, three wrong place
    assert reward == 4.0
    assert terminated is False
    assert truncated is False
    assert info["submit_status"] is SubmitStatus.ACCEPTED
    assert info["action_mask"][ord("T") - 65] == 0
    assert info["action_mask"][ord("C") - 65] == 1


def test_solving_gives_bonus_and_terminates(env):
    env.reset(options={"scripted_guesses": []})
    act_word(env, "CRANE")
    _, reward, terminated, _, info = env.step(SUBMIT_ACTION)

    assert reward == 19.0
    assert terminated is True
    assert info["state"] is SessionState.WON
    assert info["score"] == 1
    assert np.sum(info["action_mask"]) == 0


def test_rejected_submit_costs_a_step(env):
    env.reset(options={"scripted_guesses": []})
    act_word(env, "CRA")
    _, reward, _, _, info = env.step(SUBMIT_ACTION)
    assert reward == -1.0
    assert info["submit_status"] is SubmitStatus.INCOMPLETE
    assert info["action_mask"][BACKSPACE_ACTION] == 1


def test_truncates_after_max_guesses():
    vocab = WordVocab(list(WORDS))
    env = GymAntiwordEnv(vocab, WordSampler(vocab), max_guesses=1)
    env.reset(options={"scripted_guesses": []})
    act_word(env, "PLUMB")
    _, _, terminated, truncated, _ = env.step(SUBMIT_ACTION)
    assert terminated is False
    assert truncated is True


def test_seeded_reset_is_reproducible(env):
    env.reset(seed=5)
    first = env.session.secret
    env.reset(seed=5)
    assert env.session.secret == first


def test_invalid_action_raises(env):
    env.reset()
    with pytest.raises(gym.error.InvalidAction):
        env.step(28)


def test_render_returns_text(env):
    env.reset(options={"scripted_guesses": ["react"]})
    text = env.render()
    assert "[R?]" in text
    assert "Score: 2." in text
