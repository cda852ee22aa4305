import pytest

from taskmaster.process import Process, ProcessGroup, ProcessManager, ProcessState


def test_process_holds_its_fields():
    process = Process(pid=42, name="web1", state=ProcessState.STARTING)
    assert (process.pid, process.name, process.state) == (
        42,
        "web1",
        ProcessState.STARTING,
    )


@pytest.mark.parametrize("state", list(ProcessState))
def test_process_keeps_each_state(state):
    process = Process(1, "worker", state)
    assert process.state is state


def test_group_holds_a_process_in_every_state():
    group = ProcessGroup("all")
    for number, state in enumerate(ProcessState, start=1):
        process = Process(number, f"all{number}", state)
        group.processes[process.name] = process
    states = [process.state for process in group.processes.values()]
    assert states == list(ProcessState)
    assert len(set(states)) == len(group.processes)


def test_process_group_keys_processes_by_name():
    group = ProcessGroup("web")
    process = Process(7, "web1", ProcessState.STOPPED)
    group.processes[process.name] = process
    assert group.processes == {"web1": process}
    assert group.programname == "web"


def test_process_groups_do_not_share_processes():
    first = ProcessGroup("a")
    second = ProcessGroup("b")
    first.processes["a1"] = Process(1, "a1", ProcessState.EXITED)
    assert second.processes == {}


def test_process_manager_holds_groups():
    manager = ProcessManager()
    assert manager.process_groups == {}
    group = ProcessGroup("db")
    manager.process_groups["db"] = group
    assert manager.process_groups["db"] is group
    assert ProcessManager().process_groups == {}