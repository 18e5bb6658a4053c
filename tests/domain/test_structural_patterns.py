from pattern_gallery.domain.structural.adapter import AggregatedTask, Task, TaskAdapter
from pattern_gallery.domain.structural.bridge import BlueColor, Circle, RedColor, Square
from pattern_gallery.domain.structural.facade import Facade, SubsystemA, SubsystemB


class TestAdapter:
    def test_adapter_is_a_task(self):
        assert isinstance(TaskAdapter(AggregatedTask()), Task)

    def test_adapter_delegates_to_adaptee(self):
        assert TaskAdapter(AggregatedTask()).execute() == "Executing aggregated task"


class TestBridge:
    def test_shapes_combine_with_any_color(self):
        assert Circle(RedColor()).draw() == "Drawing Circle in Red"
        assert Circle(BlueColor()).draw() == "Drawing Circle in Blue"
        assert Square(RedColor()).draw() == "Drawing Square in Red"
        assert Square(BlueColor()).draw() == "Drawing Square in Blue"

    def test_color_can_be_swapped(self):
        shape = Square(RedColor())
        shape.color = BlueColor()

        assert shape.draw() == "Drawing Square in Blue"


class TestFacade:
    def test_facade_forwards_to_subsystems(self):
        facade = Facade(SubsystemA(), SubsystemB())

        assert facade.operation_a() == "SubsystemA: Ready!"
        assert facade.operation_b() == "SubsystemA: Go!"
        assert facade.operation_c() == "SubsystemB: Get ready!"
        assert facade.operation_d() == "SubsystemB: Fire!"
