"""Workflow registry -- maps Workflow enum values to run functions.

Every workflow follows enumerate -> process each item -> report, one item
at a time, with per-item failures routed through an ErrorGate.

Workflows:
    rename   -- Default. Replaces a leading prefix with a replacement string
                and strips a suffix from every filename under the source.
                Names that come out unchanged are left alone, so a second
                run is a no-op. Honors copy, dry-run, dot, and recurse.
    order    -- Renames files by their position in the walk: S01E07.mkv in
                TV mode, <prefix>0007.jpg otherwise. Numbering starts at
                offset. Results land in dest (defaults to source).
    touch    -- Sets atime/mtime of every file to one year before now; the
                timestamp is computed once per run.
    chd      -- Converts .iso (createdvd) and .gdi/.cue (createcd) disc
                images to <stem>.chd under dest via chdman, then runs
                chdman verify on the result. Other files are skipped.
    incoming -- Reconciles an incoming root against its !extract folder and
                reports entries that are missing or have a file count other
                than source count + 1 (the +1 is the !extract.log).
    extract  -- Mirrors one incoming item into !extract/<name>, copying
                video/subtitle files, skipping the rest, and extracting
                queued .rar archives via unrar. Writes !extract.log next to
                the content. Dry-run is not honored.
"""

from ..models import Workflow


def get_workflow_runner(workflow: Workflow):
    """Return the run function for a given workflow."""
    if workflow == Workflow.RENAME:
        from .rename import run as rename_run

        return rename_run

    if workflow == Workflow.ORDER:
        from .order import run as order_run

        return order_run

    if workflow == Workflow.TOUCH:
        from .touch import run as touch_run

        return touch_run

    if workflow == Workflow.CHD:
        from .chd import run as chd_run

        return chd_run

    if workflow == Workflow.INCOMING:
        from .incoming import run as incoming_run

        return incoming_run

    if workflow == Workflow.EXTRACT:
        from .extract import run as extract_run

        return extract_run

    raise ValueError(f"Unknown workflow: {workflow}")
