# Both selectors expect items as produced by index.build(), where range starts
# strictly decrease with the list index and the last item starts at zero.


def linear(items, draw):
  assert items and 0 <= draw, (len(items), draw)
  for item in items:
    if item.start <= draw:
      return item
  raise AssertionError(f'No range contains {draw}.')


def bisect(items, draw):
  assert items and 0 <= draw, (len(items), draw)
  start, end = 0, len(items)
  while start < end:
    mid = (start + end) // 2
    if items[mid].start <= draw:
      end = mid
    else:
      start = mid + 1
  return items[start]


def choose(items, draw, border):
  if len(items) < border:
    return linear(items, draw)
  else:
    return bisect(items, draw)
