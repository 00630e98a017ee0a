import os


def render_status(context, width=80):
    """
    context keys: file_path, shape, dirty, page_index, page_total,
                   page_start, page_end, total_rows
    """
    fname = context.get('file_path') or ''
    if fname:
        fname = os.path.basename(fname)
    columns, rows = context.get('shape', (0, 0))
    page_total = context.get('page_total', 1)
    page_index = context.get('page_index', 1)
    page_start = context.get('page_start', 0)
    page_end = context.get('page_end', page_start)
    total_rows = context.get('total_rows', rows)
    if total_rows:
        page_info = f"Page {page_index}/{page_total} rows {page_start}-{max(page_start, page_end - 1)} of {total_rows}"
    else:
        page_info = f"Page {page_index}/{page_total} no rows"
    marker = " [+]" if context.get('dirty') else ""
    parts = [f"{fname}{marker}".strip(), f"{rows}x{columns}", page_info]
    text = " " + " | ".join(p for p in parts if p)
    return text[:width]


def state_context(state):
    p = state.paginator
    return {
        'file_path': state.file_path,
        'shape': state.table.shape,
        'dirty': state.dirty,
        'page_index': p.page_index + 1,
        'page_total': p.page_count,
        'page_start': p.page_start,
        'page_end': p.page_end,
        'total_rows': p.total_rows,
    }
