from markupsafe import Markup


# page element (id element_id) whose html is replaced by the render functions.
# index.html hides it while visible is false
class DisplayRegion:
    def __init__(self, element_id: str, visible: bool = True):
        self.element_id = element_id
        self.visible = visible
        self.html = Markup("")
        self.scroll_requested = False

    def empty(self):
        self.html = Markup("")

    def append(self, fragment):
        self.html = self.html + Markup(fragment)

    def set_html(self, fragment):
        self.html = Markup(fragment)

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def scroll_into_view(self):
        self.scroll_requested = True

    # the scroll happens once, on the next page render
    def consume_scroll(self) -> bool:
        requested = self.scroll_requested
        self.scroll_requested = False
        return requested

    def __repr__(self):
        return f"DisplayRegion({self.element_id!r}, visible={self.visible})"
