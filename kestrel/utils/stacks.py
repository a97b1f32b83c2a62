"""
kestrel.utils.stacks
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import linecache
import sys


def get_lines_from_file(filename, lineno, context_lines, module_globals=None):
    """
    Returns context_lines before and after lineno from file.
    Returns (pre_context, context_line, post_context).
    """
    linecache.checkcache(filename)
    source = linecache.getlines(filename, module_globals)
    if not source:
        return [], None, []

    lower_bound = max(0, lineno - context_lines)
    upper_bound = min(lineno + 1 + context_lines, len(source))

    try:
        pre_context = [line.strip('\r\n') for line in source[lower_bound:lineno]]
        context_line = source[lineno].strip('\r\n')
        post_context = [line.strip('\r\n') for line in source[(lineno + 1):upper_bound]]
    except IndexError:
        # the file may have changed since it was loaded into memory
        return [], None, []

    return pre_context, context_line, post_context


def _getitem_from_frame(f_locals, key, default=None):
    """
    f_locals is not guaranteed to have .get(), but it will always
    support __getitem__. Even if it doesnt, we return ``default``.
    """
    try:
        return f_locals[key]
    except Exception:
        return default


def iter_traceback_frames(tb):
    """
    Given a traceback object, it will iterate over all
    frames that do not contain the ``__traceback_hide__``
    local variable.
    """
    while tb:
        # support for __traceback_hide__ which is used by a few libraries
        # to hide internal frames.
        f_locals = getattr(tb.tb_frame, 'f_locals', {})
        if not _getitem_from_frame(f_locals, '__traceback_hide__'):
            yield tb.tb_frame, getattr(tb, 'tb_lineno', None)
        tb = tb.tb_next


def get_stack_info(frames, context_lines=5):
    """
    Given a list of (frame, lineno) pairs, returns a list of stack
    information dictionary objects that are JSON-ready. Frames are
    ordered oldest first, as in a traceback.
    """
    __traceback_hide__ = True  # NOQA

    results = []
    for frame, lineno in frames:
        f_globals = getattr(frame, 'f_globals', {})

        f_code = getattr(frame, 'f_code', None)
        if f_code:
            abs_path = f_code.co_filename
            function = f_code.co_name
        else:
            abs_path = None
            function = None

        module_name = _getitem_from_frame(f_globals, '__name__')

        if lineno is None:
            lineno = getattr(frame, 'f_lineno', None)

        if lineno and abs_path:
            pre_context, context_line, post_context = get_lines_from_file(
                abs_path, lineno - 1, context_lines, f_globals)
        else:
            pre_context, context_line, post_context = [], None, []

        # Try to pull a relative file path
        # This changes /foo/site-packages/baz/bar.py into baz/bar.py
        filename = abs_path
        try:
            base_filename = sys.modules[module_name.split('.', 1)[0]].__file__
            filename = abs_path.split(base_filename.rsplit('/', 2)[0], 1)[-1][1:]
        except Exception:
            pass

        frame_result = {
            'abs_path': abs_path,
            'filename': filename or abs_path,
            'module': module_name or None,
            'function': function or '<unknown>',
            'lineno': lineno,
        }
        if context_line is not None:
            frame_result.update({
                'pre_context': pre_context,
                'context_line': context_line,
                'post_context': post_context,
            })

        results.append(frame_result)
    return results
