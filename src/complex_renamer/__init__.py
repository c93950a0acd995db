"""Complex Renamer -- batch rename, touch, convert, and reconcile media files.

Core modules:
    config   -- Run configuration via pydantic-settings (RENAMER_* env vars).
                CLI flags passed as kwargs to RunConfig (no env pollution).
    cli      -- Click CLI entry point; picks exactly one workflow per run.
    runner   -- Workflow dispatch and top-level failure logging
    policy   -- ErrorGate: the one place a per-item failure is either
                re-raised (halt) or recorded and skipped (force)
    process  -- chdman / unrar subprocess bridge. Spawn failures raise
                ProcessSpawnError, nonzero exits raise ProcessExitError.
    runlog   -- Per-run log file (!extract.log), fsynced after every line

Subpackages:
    ops       -- Directory walker, naming policy, file operation executor
    workflows -- rename, order, touch, chd, incoming, extract
"""

__version__ = "0.2.0"
