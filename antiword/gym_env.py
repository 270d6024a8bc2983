from __future__ import annotations
import math

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from antiword.board import format_board
from antiword.feedback import Classification, count_by_state
from antiword.session import GameSession, SessionState, SubmitStatus
from antiword.vocab import WordVocab
from antiword.sampler import WordSampler

BACKSPACE_ACTION = 26
SUBMIT_ACTION = 27
N_ACTIONS = 28
OBS_SIZE = 5 * 26 + 26 + 1 + 1


class GymAntiwordEnv(gym.Env):
    """
    Gymnasium front end for a GameSession; every step delivers one input event.
    - Actions: 0..25 type A..Z, 26 backspace, 27 submit
    - Observation: 158-dim float32 vector
        enforcement map (5*26) + keyboard hints / 3 (26) + entry column / 5 + log1p(candidates)
    - info contains an 'action_mask' (int8 array) with the events the session would accept.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        vocab: WordVocab,
        sampler: WordSampler | None = None,
        *,
        max_guesses: int | None = None,
        alpha: float = 2.0,         # reward per right-place letter
        beta: float = 1.0,          # reward per wrong-place letter
        step_penalty: float = 1.0,  # per-submit cost
        success_bonus: float = 10.0,
        render_mode: str | None = None,
    ) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if sampler is None:
            sampler = WordSampler(vocab)
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"unsupported render_mode: {render_mode}")

        self.vocab = vocab
        self.session = GameSession(vocab, sampler)
        self.max_guesses = max_guesses
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.step_penalty = float(step_penalty)
        self.success_bonus = float(success_bonus)
        self.render_mode = render_mode
        self._last_mask: np.ndarray | None = None

        self.observation_space = spaces.Box(
            low=0.0, high=np.inf, shape=(OBS_SIZE,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(N_ACTIONS)

    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        if seed is not None:
            self.session.sampler.set_seed(seed)
        scripted = (options or {}).get("scripted_guesses")
        self.session.reset(scripted)
        return self._observation(), self._info(None)

    def step(self, action: int):
        action = int(action)
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")

        session = self.session
        reward = 0.0
        status = None
        if action == BACKSPACE_ACTION:
            session.backspace()
        elif action == SUBMIT_ACTION:
            row = session.entry_position[0]
            status = session.submit()
            if status in (SubmitStatus.ACCEPTED, SubmitStatus.WON):
                counts = count_by_state(c.state for c in session.render_model().rows[row])
                reward = (
                    self.alpha * counts[Classification.RIGHT_PLACE]
                    + self.beta * counts[Classification.WRONG_PLACE]
                    - self.step_penalty
                )
                if status is SubmitStatus.WON:
                    reward += self.success_bonus
            elif status is not SubmitStatus.GAME_OVER:
                reward = -self.step_penalty
        else:
            session.enter_letter(chr(65 + action))

        terminated = session.state is SessionState.WON
        truncated = (
            not terminated
            and self.max_guesses is not None
            and session.submitted_rows >= self.max_guesses
        )
        return self._observation(), float(reward), terminated, bool(truncated), self._info(status)

    # -------------------------
    # Helpers
    # -------------------------
    def action_mask(self) -> np.ndarray:
        session = self.session
        mask = np.zeros(N_ACTIONS, dtype=np.int8)
        for li in range(26):
            mask[li] = session.can_enter(chr(65 + li))
        entering = session.state is SessionState.ENTERING
        mask[BACKSPACE_ACTION] = entering and session.entry_position[1] > 0
        mask[SUBMIT_ACTION] = entering and session.current_word() is not None
        return mask

    def get_action_mask(self) -> np.ndarray:
        """Latest action mask; sb3-contrib's ActionMasker reads it through env.unwrapped."""
        if self._last_mask is None:
            self._last_mask = self.action_mask()
        return self._last_mask

    def _observation(self) -> np.ndarray:
        session = self.session
        enforcement = session.enforcement.as_array().astype(np.float32).ravel()
        keys = np.asarray(session.keyboard.as_list(), dtype=np.float32) / 3.0
        column = session.entry_position[1] / session.word_length
        remaining = math.log1p(session.remaining_candidates)
        return np.concatenate(
            [enforcement, keys, np.asarray([column, remaining], dtype=np.float32)]
        ).astype(np.float32)

    def _info(self, status: SubmitStatus | None) -> dict:
        self._last_mask = self.action_mask()
        model = self.session.render_model()
        return {
            "action_mask": self._last_mask,
            "submit_status": status,
            "remaining": self.session.remaining_candidates,
            "state": model.state,
            "score": model.score,
            "render_model": model,
        }

    def render(self):
        if self.render_mode == "ansi":
            return format_board(self.session.render_model())
        return None
