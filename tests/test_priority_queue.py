"""Testes da fila de prioridade ordenada (fronteira do A*)."""

import random
from dataclasses import dataclass

import pytest

from busca_astar.algorithms.priority_queue import PriorityQueue


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def youngest_first(a: Person, b: Person) -> bool:
    return a.age < b.age


def oldest_first(a: Person, b: Person) -> bool:
    return a.age > b.age


def _push_people(queue: PriorityQueue) -> None:
    queue.push(Person("Sally Jones", 12))
    queue.push(Person("Adam Smith", 18))
    queue.push(Person("Betty Parsons", 5))
    queue.push(Person("John Doe", 9))


class TestOrdering:
    def test_store_an_element(self):
        queue = PriorityQueue(youngest_first)
        assert queue.push(Person("Sally Jones", 12)) is queue
        assert len(queue) == 1

    def test_increasing_order(self):
        queue = PriorityQueue(youngest_first)
        _push_people(queue)

        names = [queue.pop().name for _ in range(4)]
        assert names == ["Betty Parsons", "John Doe", "Sally Jones", "Adam Smith"]

    def test_decreasing_order(self):
        queue = PriorityQueue(oldest_first)
        _push_people(queue)

        names = [queue.pop().name for _ in range(4)]
        assert names == ["Adam Smith", "Sally Jones", "John Doe", "Betty Parsons"]

    def test_equal_priorities_pop_in_insertion_order(self):
        queue = PriorityQueue(youngest_first)
        queue.push(Person("first", 7))
        queue.push(Person("younger", 3))
        queue.push(Person("second", 7))
        queue.push(Person("third", 7))

        names = [queue.pop().name for _ in range(4)]
        assert names == ["younger", "first", "second", "third"]

    def test_none_comparison_stops_at_compared_index(self):
        # Comparador que nunca ordena: cada elemento entra na posição sondada
        queue = PriorityQueue(lambda a, b: None)
        for value in range(5):
            queue.push(value)
        popped = [queue.pop() for _ in range(5)]
        assert sorted(popped) == list(range(5))

    @pytest.mark.parametrize("seed", range(25))
    def test_random_sequences_pop_non_decreasing(self, seed):
        rng = random.Random(seed)
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
        queue = PriorityQueue(lambda a, b: a < b)
        for value in values:
            queue.push(value)

        popped = [queue.pop() for _ in range(len(values))]
        assert popped == sorted(values)
        assert queue.empty()

    @pytest.mark.parametrize("seed", range(10))
    def test_random_floats_with_interleaved_pops(self, seed):
        rng = random.Random(seed)
        queue = PriorityQueue(lambda a, b: a < b)
        last = float("-inf")
        for _ in range(200):
            if rng.random() < 0.6 or queue.empty():
                # Só insere valores >= ao último retirado, como numa busca com heurística consistente
                queue.push(last + rng.random() * 10 if last != float("-inf") else rng.random())
            else:
                value = queue.pop()
                assert value >= last
                last = value


class TestMembership:
    def test_pop_empty_returns_none(self):
        queue = PriorityQueue(youngest_first)
        queue.push(Person("Sally Jones", 12))

        assert queue.pop().name == "Sally Jones"
        assert queue.pop() is None

    def test_include(self):
        queue = PriorityQueue(youngest_first)
        sally = Person("Sally Jones", 12)
        john = Person("John Doe", 9)
        queue.push(sally)

        assert queue.include(sally)
        assert sally in queue
        assert not queue.include(john)

    def test_include_by_key(self):
        queue = PriorityQueue(youngest_first, key=lambda person: person.name)
        queue.push(Person("Sally Jones", 12))

        assert "Sally Jones" in queue
        assert "John Doe" not in queue

    def test_include_tracks_duplicates(self):
        queue = PriorityQueue(lambda a, b: a[1] < b[1], key=lambda entry: entry[0])
        queue.push(("n", 5.0))
        queue.push(("n", 2.0))

        assert queue.pop() == ("n", 2.0)
        assert "n" in queue
        assert queue.pop() == ("n", 5.0)
        assert "n" not in queue

    def test_empty(self):
        queue = PriorityQueue(youngest_first)
        assert queue.empty()
        assert not queue

        queue.push(Person("Sally Jones", 12))
        assert not queue.empty()
        assert queue

        queue.pop()
        assert queue.empty()
