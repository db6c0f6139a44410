from villagesim.pathfinding import Pathfinder
from villagesim.resources import ResourceType
from villagesim.storage import StorageBuilding, StorageBuildingPool


def test_new_storage_starts_empty():
    storage = StorageBuilding()
    assert dict(storage.inventory.items()) == {
        ResourceType.BERRIES: 0,
        ResourceType.WOOD: 0,
        ResourceType.WATER: 0,
    }


def test_storages_have_separate_inventories():
    a = StorageBuilding()
    b = StorageBuilding()
    a.inventory.add(ResourceType.WOOD, 7)
    assert a.inventory.amount(ResourceType.WOOD) == 7
    assert b.inventory.amount(ResourceType.WOOD) == 0


def test_storages_compare_by_identity():
    first = StorageBuilding()
    second = StorageBuilding()
    assert (first == second) is False
    assert [first, second].index(second) == 1
    assert [first].count(second) == 0


def test_pool_adds_storages_and_links_nodes():
    pathfinder = Pathfinder({}, 250)
    pool = StorageBuildingPool(pathfinder)
    first = StorageBuilding(location=(10.0, 20.0, 0.0))
    second = StorageBuilding(location=(2000.0, 20.0, 0.0))
    pool.add_from_scene([None, first, second])
    assert pool.storages == [first, second]
    assert pool.count == 2
    assert len(pool) == 2
    assert first.grid_position == (10, 20)
    assert second.grid_position == (2000, 20)
    assert pathfinder.node_map[(10, 20)].position == (10.0, 20.0, 0.0)


def test_pool_leaves_distant_storages_unlinked():
    pathfinder = Pathfinder({}, 250)
    pool = StorageBuildingPool(pathfinder)
    pool.add_from_scene(
        [StorageBuilding(location=(0.0, 0.0, 0.0)), StorageBuilding(location=(5000.0, 0.0, 0.0))]
    )
    assert pathfinder.node_map[(0, 0)].neighbors == []
    assert pathfinder.node_map[(5000, 0)].neighbors == []


def test_pool_iterates_in_insertion_order():
    pool = StorageBuildingPool(Pathfinder({}, 250))
    storages = [StorageBuilding(location=(float(i) * 1000, 0.0, 0.0)) for i in range(3)]
    pool.add_from_scene(storages)
    assert list(pool) == storages