"""Cloning objects, including ones that point back at their owner."""

import copy
from typing import Any, Optional


class ComponentWithBackReference:
    def __init__(self, prototype: Optional["Prototype"] = None):
        self.prototype = prototype


class Prototype:
    """Example class whose fields of different kinds are cloned."""

    def __init__(self):
        self.primitive: Any = None
        self.component: Any = None
        self.circular_reference: Optional[ComponentWithBackReference] = None

    def clone(self) -> "Prototype":
        """
        Copy the fields first, then deep-copy the nested objects.

        The memo maps this prototype to its clone, so any back reference met
        during the deep copy is rewired to the clone instead of the original.
        """
        clone = copy.copy(self)
        memo = {id(self): clone}
        clone.component = copy.deepcopy(self.component, memo)
        clone.circular_reference = copy.deepcopy(self.circular_reference, memo)
        return clone


def demo() -> None:
    p1 = Prototype()
    p1.primitive = 245
    p1.component = [1, {1, 2, 3}, [1, 2, 3]]
    p1.circular_reference = ComponentWithBackReference(p1)

    p2 = p1.clone()

    if p1.primitive == p2.primitive:
        print("Primitive field values have been carried over to a clone. Yay!")
    else:
        print("Primitive field values have not been copied. Booo!")

    if p1.component is p2.component:
        print("Simple component has not been cloned. Booo!")
    else:
        print("Simple component has been cloned. Yay!")

    if p1.circular_reference is p2.circular_reference:
        print("Component with back reference has not been cloned. Booo!")
    else:
        print("Component with back reference has been cloned. Yay!")

    if p1.circular_reference.prototype is p2.circular_reference.prototype:
        print("Component with back reference is linked to original object. Booo!")
    else:
        print("Component with back reference is linked to the clone. Yay!")
