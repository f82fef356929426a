"""Per-guest timeline table assembled from the sampled stage durations"""
import heapq
import logging
from dataclasses import dataclass
import numpy as np
import pandas as pd
from .errors import ModelConfigError
from .models import Config
from .sampling import SampleSet

logger = logging.getLogger(__name__)

LEDGER_COLUMNS = [
    "guest_id", "batch_id", "batch_size", "room_type", "arrival",
    "checkin", "escort_in", "room_stay", "escort_out", "housekeeping",
    "reception_start", "reception_end", "reception_wait",
    "room_entry", "checkout", "exit", "room_ready", "within_horizon",
]

@dataclass
class HorizonCheck:
    """Guest-count cutoff versus the simulated time horizon"""
    horizon_minutes: float
    guest_cutoff: int
    cutoff_reached_at: float      # arrival minute of the last ledger guest
    guests_within_horizon: int
    guests_after_horizon: int
    warning: str

def assemble_ledger(samples: SampleSet, cfg: Config, cutoff: int = None) -> pd.DataFrame:
    """
    Walk the arrival events in order; each event is a batch of 1-3 guests that
    share the event's sampled durations and room type. Reception is a FIFO line
    served by `receptionists` desks, so each row's start chains off the rows
    before it. Stops at exactly `cutoff` guests (the last batch may be cut short).
    """
    cutoff = cfg.simulation.guest_cutoff if cutoff is None else cutoff
    if cutoff < 1:
        raise ModelConfigError(f"guest cutoff must be >= 1, got {cutoff}")
    if int(np.sum(samples.group_size)) < cutoff:
        raise ModelConfigError(
            f"{len(samples)} arrival events hold only {int(np.sum(samples.group_size))} guests; "
            f"cannot fill a cutoff of {cutoff}"
        )

    horizon = cfg.timing.horizon_minutes
    share = cfg.pricing.premium_share
    desks = [0.0] * cfg.staffing.receptionists   # next free minute per desk
    heapq.heapify(desks)

    rows = []
    arrival = 0.0
    for batch_id in range(len(samples)):
        arrival += float(samples.interarrival[batch_id])
        batch_size = int(samples.group_size[batch_id])
        room_type = "premium" if samples.room_choice[batch_id] < share else "standard"
        checkin = float(samples.checkin[batch_id])
        escort_in = float(samples.escort_in[batch_id])
        stay = float(samples.room_stay[batch_id])
        escort_out = float(samples.escort_out[batch_id])
        cleaning = float(samples.housekeeping[batch_id])

        for _ in range(batch_size):
            if len(rows) == cutoff:
                break
            free_at = heapq.heappop(desks)
            start = max(arrival, free_at)
            end = start + checkin
            heapq.heappush(desks, end)

            room_entry = end + escort_in
            checkout = room_entry + stay
            exit_t = checkout + escort_out
            rows.append({
                "guest_id": len(rows),
                "batch_id": batch_id,
                "batch_size": batch_size,
                "room_type": room_type,
                "arrival": arrival,
                "checkin": checkin,
                "escort_in": escort_in,
                "room_stay": stay,
                "escort_out": escort_out,
                "housekeeping": cleaning,
                "reception_start": start,
                "reception_end": end,
                "reception_wait": start - arrival,
                "room_entry": room_entry,
                "checkout": checkout,
                "exit": exit_t,
                "room_ready": exit_t + cleaning,
                "within_horizon": arrival <= horizon,
            })
        if len(rows) == cutoff:
            break

    logger.info("Ledger assembled: %d guests from %d arrival events", len(rows), batch_id + 1)
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)

def horizon_check(ledger: pd.DataFrame, cfg: Config) -> HorizonCheck:
    """The ledger stops on guest count, not time; report how far apart the two are"""
    horizon = cfg.timing.horizon_minutes
    cutoff = len(ledger)
    reached = float(ledger["arrival"].iloc[-1]) if cutoff else 0.0
    within = int(ledger["within_horizon"].sum()) if cutoff else 0
    after = cutoff - within

    if after > 0:
        warning = (f"⚠️ {after} of {cutoff} ledger guests arrive after the "
                   f"{horizon:.0f}-minute horizon (cutoff reached at minute {reached:.0f})")
    elif reached < horizon:
        warning = (f"⚠️ Guest cutoff {cutoff} reached at minute {reached:.0f}; "
                   f"the last {horizon - reached:.0f} minutes of the horizon are not simulated")
    else:
        warning = ""
    if warning:
        logger.warning(warning)

    return HorizonCheck(
        horizon_minutes=horizon,
        guest_cutoff=cutoff,
        cutoff_reached_at=reached,
        guests_within_horizon=within,
        guests_after_horizon=after,
        warning=warning,
    )

def ledger_summary(ledger: pd.DataFrame) -> dict:
    """Per-stage mean durations and waits, plus the realised room-type mix"""
    stages = ["checkin", "escort_in", "room_stay", "escort_out", "housekeeping", "reception_wait"]
    counts = ledger["room_type"].value_counts()
    guests = len(ledger)
    return {
        "guests": guests,
        "batches": int(ledger["batch_id"].nunique()),
        "mean_minutes": {s: float(ledger[s].mean()) for s in stages},
        "max_reception_wait": float(ledger["reception_wait"].max()),
        "standard_guests": int(counts.get("standard", 0)),
        "premium_guests": int(counts.get("premium", 0)),
        "premium_share": float(counts.get("premium", 0)) / guests if guests else 0.0,
        "last_room_ready": float(ledger["room_ready"].max()),
    }
