"""
Driving range session service.
"""

from typing import Any

from golfezz.models.responses import ApiResponse
from golfezz.services.base_service import BaseService


class RangeService(BaseService):
    """Walk-in range sessions with ball buckets and rented equipment."""
    
    def start_session(self, bay_number: int | None = None, notes: str | None = None) -> ApiResponse:
        payload: dict[str, Any] = {}
        if bay_number is not None:
            payload['bay_number'] = bay_number
        if notes:
            payload['notes'] = notes
        return self.client.post('/range/sessions', payload)
    
    def get_active_sessions(self) -> ApiResponse:
        return self.client.get('/range/sessions/active')
    
    def get_session(self, session_id: str) -> ApiResponse:
        return self.client.get(f'/range/sessions/{session_id}')
    
    def end_session(self, session_id: str) -> ApiResponse:
        return self.client.post(f'/range/sessions/{session_id}/end')
    
    def add_ball_bucket(
        self,
        session_id: str,
        bucket_size: str,
        ball_count: int,
        price: float
    ) -> ApiResponse:
        """Add a ball bucket to an open session."""
        return self.client.post(
            f'/range/sessions/{session_id}/buckets',
            {'bucket_size': bucket_size, 'ball_count': ball_count, 'price': price}
        )
    
    def add_equipment(
        self,
        session_id: str,
        equipment_type: str,
        equipment_name: str,
        quantity: int,
        price: float
    ) -> ApiResponse:
        """Add rented equipment to an open session."""
        return self.client.post(
            f'/range/sessions/{session_id}/equipment',
            {
                'equipment_type': equipment_type,
                'equipment_name': equipment_name,
                'quantity': quantity,
                'price': price,
            }
        )
    
    def return_ball_bucket(self, bucket_id: str) -> ApiResponse:
        return self.client.post(f'/range/buckets/{bucket_id}/return')
    
    def return_equipment(self, equipment_id: str) -> ApiResponse:
        return self.client.post(f'/range/equipment/{equipment_id}/return')
