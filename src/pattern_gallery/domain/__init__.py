"""Domain layer - one package per pattern category.

Packages:
    - core: exceptions shared by every pattern
    - creational: Singleton, Prototype, Factory Method
    - structural: Adapter, Bridge, Composite, Facade, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Memento, Observer, State,
      Strategy, Template Method
"""
