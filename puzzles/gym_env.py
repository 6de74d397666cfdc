from __future__ import annotations

from typing import Dict, List, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from puzzles import game_settings as gs
from puzzles.constraints import filter_candidates
from puzzles.feedback import CORRECT, PRESENT, SCORE_CODES
from puzzles.sampler import WordSampler
from puzzles.session import GameStatus, Rejection
from puzzles.vocab import Corpus
from puzzles.wordle import WordleSession

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# unknown, absent, present, correct
HINT_SLOTS = 4
OBS_SIZE = len(ALPHABET) * HINT_SLOTS + 1


class GymWordleEnv(gym.Env):
    """
    Gymnasium wrapper around a WordleSession.

    - Observation: 105-dim float32 vector. For each letter A..Z a one-hot over
      (unknown, absent, present, correct) keyboard hints, then the fraction of
      the guess budget already used.
    - Action space: Discrete(len(corpus)), an index into the corpus.
    - Reward: alpha * correct + beta * present - step_penalty, plus
      success_bonus on a solve.
    - info contains an 'action_mask' (int8 array) for valid actions at each step.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        corpus: Corpus,
        sampler: Optional[WordSampler] = None,
        *,
        max_guesses: int = gs.WORDLE_MAX_GUESSES,
        alpha: float = 2.0,         # reward per correct letter
        beta: float = 1.0,          # reward per present letter
        step_penalty: float = 1.0,  # per-step cost
        success_bonus: float = 10.0,
        allow_probe_guesses: bool = False,
    ) -> None:
        if not isinstance(corpus, Corpus):
            raise TypeError("corpus must be a Corpus")
        if corpus.word_length is None:
            raise ValueError("corpus words must share one length")

        self.corpus = corpus
        self.sampler = sampler if sampler is not None else WordSampler()
        self.session = WordleSession(corpus, self.sampler, max_guesses=max_guesses)
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.step_penalty = float(step_penalty)
        self.success_bonus = float(success_bonus)
        self.allow_probe_guesses = bool(allow_probe_guesses)

        self._candidates: List[str] = corpus.words()
        self._last_mask: Optional[np.ndarray] = None

        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=(OBS_SIZE,), dtype=np.float32)
        self.action_space = spaces.Discrete(len(corpus))

    # -------------------------
    # Core env API
    # -------------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None):
        """Start a new round. ``options={"answer": WORD}`` fixes the answer (useful for tests)."""
        super().reset(seed=seed)
        if seed is not None:
            self.sampler.set_seed(seed)
        answer = (options or {}).get("answer")
        self.session.new_round(answer)
        self._candidates = self.corpus.words()

        info = {"action_mask": self._build_action_mask()}
        self._last_mask = info["action_mask"]
        return self._build_observation(), info

    def step(self, action: int):
        action = int(action)
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        if self.session.state.done:
            raise RuntimeError("episode is over; call reset() before stepping")
        if self._last_mask is not None and not self._last_mask[action]:
            raise ValueError(
                "action not allowed by current candidate set (set allow_probe_guesses=True to permit probes)"
            )

        guess = self.corpus.word_at(action)
        result = self.session.submit(guess)
        if isinstance(result, Rejection):
            raise ValueError(f"guess {guess!r} rejected: {result.message}")

        row = result.rows[-1]
        corrects = sum(1 for s in row if s == CORRECT)
        presents = sum(1 for s in row if s == PRESENT)
        reward = self.alpha * corrects + self.beta * presents - self.step_penalty

        solved = result.status is GameStatus.WON
        if solved:
            reward += self.success_bonus
            self._candidates = [result.answer]
        else:
            self._candidates = filter_candidates(self._candidates, [(guess, row)])

        mask = self._build_action_mask()
        self._last_mask = mask
        info: Dict[str, object] = {
            "guess": guess,
            "feedback": row,
            "remaining": len(self._candidates),
            "step": len(result.guesses),
            "solved": solved,
            "target": result.answer if result.done else None,
            "action_mask": mask,
        }
        return self._build_observation(), float(reward), bool(result.done), False, info

    def get_action_mask(self) -> np.ndarray:
        """
        Return the latest valid action mask as an int8 numpy array.
        This is what sb3-contrib's ActionMasker expects from
        env.unwrapped.get_action_mask().
        """
        if self._last_mask is None:
            _, info = self.reset()
            return info["action_mask"]
        return self._last_mask

    # -------------------------
    # Helpers
    # -------------------------
    def _build_action_mask(self) -> np.ndarray:
        if self.allow_probe_guesses:
            return np.ones(len(self.corpus), dtype=np.int8)
        mask = np.zeros(len(self.corpus), dtype=np.int8)
        for w in self._candidates:
            mask[self.corpus.index_of(w)] = 1
        return mask

    def _build_observation(self) -> np.ndarray:
        state = self.session.state
        obs = np.zeros(OBS_SIZE, dtype=np.float32)
        hints = state.letter_states
        for li, letter in enumerate(ALPHABET):
            status = hints.get(letter)
            slot = 0 if status is None else SCORE_CODES[status] + 1
            obs[li * HINT_SLOTS + slot] = 1.0
        obs[-1] = len(state.guesses) / max(1, state.max_guesses)
        return obs
