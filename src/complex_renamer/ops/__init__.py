"""File operations for the batch renamer.

Submodules:
    walker  -- walk(root, skip_dot_files, recurse, policy) -> WalkResult.
               Name-sorted, pre-order; directories are always recorded and
               their contents merged in when recursing. Unlistable root
               raises TraversalError; per-entry stat failures go through
               the ErrorGate. file_count() wraps walk().
    naming  -- Pure naming policy: ordered_name (SxxEyy or prefix0000),
               substituted_name (prefix swap + suffix strip), and
               one_year_before for the touch timestamp.
    fileops -- move_or_copy, touch, ensure_dir. Logs "src => dest" before
               acting; dry_run logs only. OS errors propagate as OSError.
"""
