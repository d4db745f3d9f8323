from .core import replay_game, replay_batch
from .io import write_csv, write_replay_outputs, build_manifest, unsound_answers

__all__ = ["replay_game", "replay_batch", "write_csv", "write_replay_outputs",
           "build_manifest", "unsound_answers"]
