"""
Reusing a typed view stored in a cell's generic accessory slot.

Run: python examples/reusable_views.py
"""
from optionkit import AttributeSlot, ConsoleLogger, use_logger


class View:
    pass


class ImageView(View):
    pass


class TodoItemStatusView(View):
    def __init__(self):
        self.status = "todo"
        print("created status view")


class TableCell:
    def __init__(self):
        self.accessory_view = None


def configure(cell: TableCell, status: str) -> None:
    view = AttributeSlot(cell, "accessory_view").get_or_insert(TodoItemStatusView)
    view.status = status


def main():
    use_logger(ConsoleLogger(name="cells", level="DEBUG"))
    cell = TableCell()
    cell.accessory_view = ImageView()
    configure(cell, "todo")   # replaces the ImageView (logged at WARN)
    configure(cell, "done")   # reuses the status view
    print(type(cell.accessory_view).__name__, cell.accessory_view.status)


if __name__ == "__main__":
    main()
