from typing import List


def parse_csv_line(line: str, sep: str = ",") -> List[str]:
    """
    Split one CSV line into fields.
    Quoted fields use "" for a literal quote. Line endings outside quotes are dropped.
    Fields spanning several lines are not supported; an unterminated quote runs to end of line.
    """
    out: List[str] = []
    cur: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        c = line[i]
        if in_quotes:
            if c == '"':
                if i + 1 < n and line[i + 1] == '"':
                    cur.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                cur.append(c)
        elif c == '"':
            in_quotes = True
        elif c == sep:
            out.append("".join(cur))
            cur = []
        elif c not in ("\r", "\n"):
            cur.append(c)
        i += 1
    out.append("".join(cur))
    return out
