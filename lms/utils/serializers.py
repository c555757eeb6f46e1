def author_json(a):
    if a is None:
        return None
    return {"id": a.id, "name": a.name}


def book_json(b):
    return {"id": b.id, "title": b.title, "author": author_json(b.author)}


def branch_json(br):
    return {"id": br.id, "name": br.name, "address": br.address}


def borrower_json(bo):
    return {"id": bo.id, "name": bo.name, "address": bo.address, "phone": bo.phone}


def copies_json(book, branch, copies: int):
    return {"book": book_json(book), "branch": branch_json(branch), "copies": copies}


def loan_json(loan):
    return {
        "book": book_json(loan.book),
        "borrower": borrower_json(loan.borrower),
        "branch": branch_json(loan.branch),
        "date_out": loan.date_out.isoformat() if loan.date_out else None,
        "due_date": loan.due_date.isoformat() if loan.due_date else None,
    }
