"""JSON round-trip — restore parsed data as typed objects."""

from selkie import Rectangle, builder, from_json, to_json
from selkie.selector import Selector

rect = Rectangle(10, 20)
json_str = to_json(rect)
restored = from_json(Rectangle, json_str)

print("JSON:", json_str)
print("Area of restored rectangle:", restored.get_area())

# Selectors keep their validation state across the round-trip
selector = builder.element("li").class_("item")
restored_selector = from_json(Selector, to_json(selector))
print("Restored selector:", restored_selector.pseudo_class("hover"))
