"""
Resettable delay timer for zinc-util
"""

import logging
import threading
from typing import Callable, Optional

from .scheduling import Scheduler, ScheduledTask, TaskState, TimerScheduler


class Alarm:
   """
   Resettable, cancellable single-shot timer

   Invokes a fixed action once, delay seconds after construction or after
   the latest reset(). An alarm with a non-positive delay never fires.
   Cancelling is terminal: reset() after cancel() does nothing.
   """

   def __init__(self,
                delay: float,
                action: Callable[[], None],
                scheduler: Optional[Scheduler] = None):
      """
      Initialize and arm the alarm

      Args:
         delay: Delay in seconds before the action runs
         action: Zero-argument callable to invoke
         scheduler: Scheduler to fire on (optional, a private
            TimerScheduler is created when first needed)
      """
      self.delay = delay
      self.action = action
      self.logger = logging.getLogger(__name__)

      self._scheduler = scheduler
      self._owns_scheduler = scheduler is None
      self._task: Optional[ScheduledTask] = None
      self._cancelled = False
      self._lock = threading.Lock()

      with self._lock:
         self._schedule()

   def _schedule(self) -> None:
      # Caller holds self._lock
      if self._task is not None or self.delay <= 0:
         return

      if self._scheduler is None:
         self._scheduler = TimerScheduler(name="zinc-alarm")

      self._task = self._scheduler.schedule(self.delay, self.action)

   def reset(self) -> None:
      """Cancel any pending firing and re-arm for delay seconds from now"""
      with self._lock:
         if self._cancelled:
            self.logger.debug("Ignoring reset of cancelled alarm")
            return

         if self._task is not None:
            self._task.cancel()
            self._task = None

         self._schedule()

   def cancel(self) -> None:
      """Permanently stop the alarm and release its scheduler"""
      with self._lock:
         if self._cancelled:
            return

         self._cancelled = True
         if self._task is not None:
            self._task.cancel()
            self._task = None

         if self._owns_scheduler and self._scheduler is not None:
            self._scheduler.shutdown()

   @property
   def cancelled(self) -> bool:
      return self._cancelled

   @property
   def pending(self) -> bool:
      """Whether a firing is currently scheduled and not yet started"""
      with self._lock:
         return self._task is not None and self._task.state is TaskState.SCHEDULED

   def __repr__(self) -> str:
      return f"Alarm(delay={self.delay}, pending={self.pending}, cancelled={self._cancelled})"


def timer(delay: float,
          action: Callable[[], None],
          scheduler: Optional[Scheduler] = None) -> Alarm:
   """
   Schedule a resettable timer

   Args:
      delay: Delay in seconds
      action: Action to run when the timer fires
      scheduler: Scheduler to use (optional)

   Returns:
      Armed Alarm
   """
   return Alarm(delay, action, scheduler=scheduler)
