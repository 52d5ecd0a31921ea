#!/usr/bin/env python3
"""Unit tests for built-in evaluation strategies and the registry."""
import math
import os
import numpy as np
import pytest

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from frontier_selection.exceptions import ConfigurationError
from frontier_selection.strategies import (
    Constant,
    DirectionConsistency,
    FrontierValue,
    MaxInformationGain,
    MaxOpenness,
    MaxSize,
    MinEuclideanDistance,
    MinPathDistance,
    StrategyRegistry,
    default_registry,
)
from frontier_selection.types import ExplorationContext, Frontier, MapInfo, RobotState


def block(gx, gy):
    """Frontier of the 3 cells centered on (gx, gy)."""
    return Frontier(((gx - 1, gy), (gx, gy), (gx + 1, gy)))


# ==================== Fixtures ====================

@pytest.fixture
def open_map():
    return MapInfo.from_array(np.zeros((30, 30), dtype=int), resolution=1.0)


@pytest.fixture
def context(open_map):
    return ExplorationContext(map_info=open_map, robot=RobotState(x=0.0, y=0.0))


# ==================== Tests ====================

class TestFrontier:
    def test_size_and_center(self):
        frontier = Frontier(((0, 0), (1, 0), (2, 0)))
        assert frontier.size == 3
        assert frontier.center == (1, 0)

    def test_structural_equality(self):
        assert Frontier([(1, 2), (2, 2)]) == Frontier(((1, 2), (2, 2)))

    def test_empty_frontier_rejected(self):
        with pytest.raises(ValueError):
            Frontier(())


class TestSizeAndConstant:
    def test_max_size(self, context):
        assert MaxSize().score(Frontier(((0, 0), (1, 0))), context) == 2.0

    def test_weight(self, context):
        assert MaxSize({'weight': '0.5'}).score(block(5, 5), context) == 1.5

    def test_constant(self, context):
        assert Constant({'value': '1'}).score(block(5, 5), context) == 1.0

    def test_constant_requires_value(self):
        with pytest.raises(ConfigurationError):
            Constant()

    def test_malformed_weight(self):
        with pytest.raises(ConfigurationError):
            MaxSize({'weight': 'heavy'})


class TestDistance:
    def test_closer_scores_higher(self, context):
        strategy = MinEuclideanDistance()
        assert strategy.score(block(2, 2), context) > strategy.score(block(10, 10), context)

    def test_inverse_distance(self, context):
        # Center (3, 0) lies at world (3.5, 0.5)
        expected = 1.0 / (math.hypot(3.5, 0.5) + 0.1)
        assert MinEuclideanDistance().score(block(3, 0), context) == pytest.approx(expected)

    def test_path_distance_falls_back_to_euclidean(self, context):
        frontier = block(6, 4)
        assert MinPathDistance().score(frontier, context) == pytest.approx(
            MinEuclideanDistance().score(frontier, context)
        )

    def test_path_distance_uses_distance_map(self, context):
        distance_map = np.full((30, 30), np.inf)
        distance_map[10, 10] = 5.0
        context.distance_map = distance_map

        strategy = MinPathDistance()
        assert strategy.score(block(2, 2), context) == 0.0
        assert strategy.score(block(10, 10), context) == pytest.approx(1.0 / 5.1)

    def test_non_positive_epsilon(self):
        with pytest.raises(ConfigurationError):
            MinEuclideanDistance({'epsilon': '0'})


class TestInformationGain:
    def test_unknown_nearby_scores_higher(self, open_map):
        open_map.data[:, 20:] = -1
        context = ExplorationContext(map_info=open_map)
        strategy = MaxInformationGain({'radius': '5'})

        near = strategy.score(block(18, 15), context)
        far = strategy.score(block(3, 15), context)
        assert near > 0.0
        assert far == 0.0

    def test_capped_at_one(self):
        unknown = MapInfo.from_array(np.full((30, 30), -1), resolution=1.0)
        context = ExplorationContext(map_info=unknown)
        assert MaxInformationGain({'normalizer': '1'}).score(block(15, 15), context) == 1.0

    def test_negative_radius(self):
        with pytest.raises(ConfigurationError):
            MaxInformationGain({'radius': '-3'})


class TestOpenness:
    def test_open_space(self, context):
        assert MaxOpenness().score(block(20, 15), context) == pytest.approx(1.0)

    def test_wall_penalty(self, open_map):
        open_map.data[:, 0:3] = 100
        context = ExplorationContext(map_info=open_map)
        strategy = MaxOpenness()

        assert strategy.is_near_wall(4, 15, open_map.data)
        assert strategy.score(block(4, 15), context) < strategy.score(block(20, 15), context)


class TestDirectionConsistency:
    def test_neutral_without_heading(self, context):
        assert DirectionConsistency().score(block(10, 0), context) == 0.5

    def test_same_direction_preferred(self, context):
        context.last_direction = 0.0
        strategy = DirectionConsistency()
        ahead = strategy.score(block(10, 0), context)
        sideways = strategy.score(block(0, 10), context)
        assert ahead > 0.9
        assert sideways == pytest.approx(0.5, abs=0.06)

    def test_neutral_when_on_top_of_frontier(self, context):
        context.last_direction = math.pi
        context.robot = RobotState(x=10.5, y=5.5)
        assert DirectionConsistency().score(block(10, 5), context) == 0.5

    def test_large_heading(self, context):
        context.last_direction = 2 * math.pi * 1e6
        assert DirectionConsistency().score(block(10, 0), context) > 0.9

    @pytest.mark.parametrize('heading', [math.inf, math.nan])
    def test_non_finite_heading_is_neutral(self, context, heading):
        context.last_direction = heading
        assert DirectionConsistency().score(block(10, 0), context) == 0.5


class TestRegistry:
    def test_default_names(self):
        registry = default_registry()
        for name in ('max_size', 'constant', 'min_euclidean_distance',
                     'min_path_distance', 'max_information_gain',
                     'max_openness', 'direction_consistency'):
            assert name in registry

    def test_create_with_string_params(self):
        strategy = default_registry().create('max_size', {'weight': 2})
        assert isinstance(strategy, MaxSize)
        assert strategy.weight == 2.0
        assert strategy.params == {'weight': '2'}

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match='nonexistent'):
            default_registry().create('nonexistent')

    def test_register_custom(self, context):
        class Flat(FrontierValue):
            name = 'flat'

            def value(self, frontier, context):
                return 7.0

        registry = StrategyRegistry()
        registry.register('flat', Flat)
        assert registry.names() == ['flat']
        assert registry.create('flat').score(block(1, 1), context) == 7.0

    def test_duplicate_registration(self):
        registry = default_registry()
        with pytest.raises(ValueError):
            registry.register('max_size', MaxSize)

    def test_factory_type_error_becomes_configuration_error(self):
        registry = StrategyRegistry()
        registry.register('broken', lambda: MaxSize())
        with pytest.raises(ConfigurationError):
            registry.create('broken')
