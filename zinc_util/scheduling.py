"""
Deferred task scheduling for zinc-util

Provides a single-worker timer scheduler (one daemon thread firing timed
callbacks in deadline order) and a manually driven scheduler for tests.
"""

import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Tuple


class SchedulerShutdownError(RuntimeError):
   """Exception raised when scheduling on a scheduler that was shut down"""
   pass


class TaskState(Enum):
   """Lifecycle of a scheduled task"""
   SCHEDULED = "scheduled"
   EXECUTING = "executing"
   EXECUTED = "executed"
   CANCELLED = "cancelled"


class ScheduledTask:
   """Handle for a single deferred invocation"""

   def __init__(self, action: Callable[[], None], deadline: float):
      self.action = action
      self.deadline = deadline
      self._state = TaskState.SCHEDULED
      self._lock = threading.Lock()

   @property
   def state(self) -> TaskState:
      return self._state

   def cancel(self) -> bool:
      """
      Cancel the task if it has not started yet

      Returns:
         True if the task was cancelled before it began executing
      """
      with self._lock:
         if self._state is TaskState.SCHEDULED:
            self._state = TaskState.CANCELLED
            return True
         return False

   def _begin(self) -> bool:
      """Claim the task for execution, False if it was cancelled"""
      with self._lock:
         if self._state is TaskState.SCHEDULED:
            self._state = TaskState.EXECUTING
            return True
         return False

   def _finish(self) -> None:
      with self._lock:
         self._state = TaskState.EXECUTED

   def run(self, logger: logging.Logger) -> bool:
      """
      Execute the action unless the task was cancelled

      Errors raised by the action are logged and otherwise ignored so that
      the worker running it survives.

      Returns:
         True if the action was invoked
      """
      if not self._begin():
         return False

      try:
         self.action()
      except Exception as e:
         logger.error(f"Scheduled action failed: {str(e)}", exc_info=True)
      finally:
         self._finish()

      return True

   def __repr__(self) -> str:
      return f"ScheduledTask(deadline={self.deadline:.3f}, state={self._state.value})"


class Scheduler(ABC):
   """Base class for deferred task schedulers"""

   @abstractmethod
   def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledTask:
      """Run action once, delay seconds from now"""
      pass

   @abstractmethod
   def shutdown(self) -> None:
      """Discard pending tasks and release scheduling resources"""
      pass


class TimerScheduler(Scheduler):
   """
   Scheduler backed by a single daemon worker thread

   The worker is started on the first call to schedule() and exits once
   the queue is empty. Tasks run one at a time on the worker, in deadline
   order.
   """

   def __init__(self, name: str = "zinc-timer", clock: Callable[[], float] = time.monotonic):
      """
      Initialize timer scheduler

      Args:
         name: Name of the worker thread
         clock: Monotonic clock returning seconds
      """
      self.name = name
      self._clock = clock
      self._queue: List[Tuple[float, int, ScheduledTask]] = []
      self._counter = itertools.count()
      self._condition = threading.Condition()
      self._thread: Optional[threading.Thread] = None
      self._shutdown = False
      self.logger = logging.getLogger(__name__)

   def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledTask:
      with self._condition:
         if self._shutdown:
            raise SchedulerShutdownError(f"Scheduler {self.name} has been shut down")

         task = ScheduledTask(action, self._clock() + max(0.0, delay))
         heapq.heappush(self._queue, (task.deadline, next(self._counter), task))
         self._ensure_worker()
         self._condition.notify()

      self.logger.debug(f"Scheduled {task} on {self.name}")
      return task

   def shutdown(self) -> None:
      with self._condition:
         if self._shutdown:
            return

         self._shutdown = True
         for _, _, task in self._queue:
            task.cancel()
         self._queue.clear()
         self._condition.notify_all()

      self.logger.debug(f"Scheduler {self.name} shut down")

   @property
   def is_shutdown(self) -> bool:
      return self._shutdown

   @property
   def pending(self) -> int:
      """Number of queued tasks that have not been cancelled"""
      with self._condition:
         return sum(1 for _, _, task in self._queue if task.state is TaskState.SCHEDULED)

   def _ensure_worker(self) -> None:
      # Caller holds self._condition
      if self._thread is None:
         self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
         self._thread.start()

   def _run(self) -> None:
      """Worker loop"""
      while True:
         with self._condition:
            task = None
            while task is None:
               if self._shutdown:
                  return

               # Drop cancelled tasks at the head of the queue
               while self._queue and self._queue[0][2].state is TaskState.CANCELLED:
                  heapq.heappop(self._queue)

               # Idle workers exit, schedule() starts a new one
               if not self._queue:
                  self._thread = None
                  return

               wait_for = self._queue[0][0] - self._clock()
               if wait_for > 0:
                  self._condition.wait(wait_for)
                  continue

               task = heapq.heappop(self._queue)[2]

         task.run(self.logger)


class ManualScheduler(Scheduler):
   """
   Scheduler driven by an explicit clock, for deterministic tests

   Time only moves when advance() is called, and due tasks run on the
   thread calling advance().
   """

   def __init__(self, start: float = 0.0):
      self.now = start
      self._queue: List[Tuple[float, int, ScheduledTask]] = []
      self._counter = itertools.count()
      self._lock = threading.Lock()
      self._shutdown = False
      self.logger = logging.getLogger(__name__)

   def schedule(self, delay: float, action: Callable[[], None]) -> ScheduledTask:
      with self._lock:
         if self._shutdown:
            raise SchedulerShutdownError("Manual scheduler has been shut down")
         task = ScheduledTask(action, self.now + max(0.0, delay))
         heapq.heappush(self._queue, (task.deadline, next(self._counter), task))
      return task

   def shutdown(self) -> None:
      with self._lock:
         self._shutdown = True
         for _, _, task in self._queue:
            task.cancel()
         self._queue.clear()

   @property
   def is_shutdown(self) -> bool:
      return self._shutdown

   @property
   def pending(self) -> int:
      with self._lock:
         return sum(1 for _, _, task in self._queue if task.state is TaskState.SCHEDULED)

   def advance(self, seconds: float) -> int:
      """
      Move the clock forward, running every task that becomes due

      Args:
         seconds: Amount of time to advance

      Returns:
         Number of actions invoked
      """
      target = self.now + seconds
      fired = 0

      while True:
         with self._lock:
            if not self._queue or self._queue[0][0] > target:
               break
            deadline, _, task = heapq.heappop(self._queue)
            self.now = max(self.now, deadline)

         if task.run(self.logger):
            fired += 1

      self.now = target
      return fired
