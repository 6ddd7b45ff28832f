# genai_wire/records/tuning.py
from ..fields import Int64, Timestamp
from .base import WireRecord

__all__ = ("Checkpoint", "TunedModelInfo")


class Checkpoint(WireRecord):
    """A fine-tuning checkpoint.

    `epoch` and `step` are required counters: they are always emitted as
    int64 strings, including when zero.
    """

    wire_order = ("checkpointId", "epoch", "step")
    wire_required = frozenset({"epoch", "step"})

    checkpoint_id: str | None = None
    epoch: Int64 = 0
    step: Int64 = 0


class TunedModelInfo(WireRecord):
    wire_order = ("baseModel", "createTime", "updateTime")

    base_model: str | None = None
    create_time: Timestamp | None = None
    update_time: Timestamp | None = None
