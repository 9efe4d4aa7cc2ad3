# triagequeue

A small simulator for a hospital triage line. Each patient has a priority.
Priorities 1 to 5 go into a priority tree, which holds one queue for each
priority value. Priority 6 means no priority, and those patients wait in a
common queue.

Two programs work together. They share state through two small binary files,
which by default live in the current directory:

- `configuracoes.dat` holds the processing status (wait, simulate or
  finish) and an interval.
- `novo_cliente_fila.dat` holds the most recently registered patient.

If a file is missing, it is created with default contents. The default
status is wait, and the default patient has id `-1`.

## Installation

```
pip install .
```

## Usage

Start the simulator in one terminal:

```
triagequeue-simulate
```

Start the control menu in another terminal:

```
triagequeue-menu
```

Both commands accept `--config PATH` and `--patients PATH` to use other
files in place of the defaults.

### The menu

| Option | Action |
|--------|--------|
| 1 | Set the status to wait |
| 2 | Set the status to simulate |
| 3 | Set the status to finish (the simulator stops) |
| 4 | Show the stored settings and the last registered patient |
| 5 | Ask for a priority and register a new patient |
| 0 | Leave the menu |

Any other input prints `Opção inválida!`.

A new patient gets the next id, starting from 0 each time the menu starts. It
also gets a random processing time of 5 to 10 seconds. The patient is written
to the patient file, replacing the previous one.

### The simulator

A background thread reads the patient file every 0.1 seconds. When the stored
id is new and not negative, the patient is queued:

- Priority 6 goes to the common queue.
- Any other priority goes to the queue of the matching tree node.
- If no node matches, an error is printed and the patient is not queued.

The main loop repeats every second. It prints the tree with each priority and
its queue. When the status is simulate, it attends one patient by sleeping for
that patient's processing time. Otherwise it prints `Aguardando...`. It then
re-reads the settings and stops once the status is finish.

The next patient to attend is chosen as follows:

- While the tree has any nodes, the patient comes only from the lowest-valued
  node that remains. If that node's queue is empty, nobody is attended in that
  cycle, even if other nodes or the common queue hold patients.
- When a pop empties a node's queue, that node is removed from the tree.
  Later patients of that priority are then rejected with an error.
- The common queue is served only after every node has left the tree.

## Library use

- `triagequeue.patient`:
  - `Patient` is a dataclass of `id`, `processing_time`, `priority`,
    `finished` and `specialty`, with `to_bytes` and `from_bytes`.
  - `Priority` holds the named levels.
  - `PatientStore` has `read`, `save` and `initial`.
- `triagequeue.queue.PatientQueue` is a FIFO queue of patients, with `append`,
  `pop`, `peek`, `len()` and iteration. `pop` raises `IndexError` when the
  queue is empty.
- `triagequeue.pqueue.PriorityTree` is the tree of `Node` objects, with
  `insert`, `find`, `peek`, `pop`, `is_empty` and `render`. `insert` ignores
  priorities outside 1 to 5.
- `triagequeue.configs`:
  - `Configs` holds the `status` and `interval`.
  - `Status` names the states: `WAIT`, `SIMULATE` and `FINISH`.
  - `ConfigStore` has `read`, `save` and `update`.
- `triagequeue.simulation.Simulation` has `poll`, `simulate`, `step` and
  `run`. It accepts an injected `sleep` callable and `out` stream.
- `triagequeue.menu.Menu` has `choose`, `handle`, `show`, `add_patient` and
  `run`. It accepts injected `read`, `out` and `rng` objects.
  `format_patient` renders a patient for display.

## Limitations

- Only one patient is handed over at a time. If several patients are
  registered between two reads, only the last one reaches the simulator.
- The stored interval is always written as 1. The simulator does not use it;
  its cycle is fixed at one second.
- The menu saves any whole number as a priority. The simulator rejects
  priorities that have no node in the tree.